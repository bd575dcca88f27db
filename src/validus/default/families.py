"""
Contains the default message decorators of the validator families. Each decorator holds a reference to the family it
decorates and forwards every call, only supplying the message rendered from the catalogue. They contain no rule
logic of their own.
"""
import re
from typing import Callable, Collection, Generic, Mapping, Optional
from uuid import UUID

from validus.types import ComparableT, T
from validus.validator import Validator
from validus.validators import (
    CollectionValidator,
    ComparisonValidator,
    EqualityValidator,
    GuidValidator,
    StringValidator,
)

from .messages import build_catalogue, message


class DefaultEqualityValidator(Generic[T]):
    """
    Decorates an `EqualityValidator` with the default error messages.
    """

    def __init__(self, base: EqualityValidator[T], messages: Optional[Mapping[str, str]] = None):
        self.base = base
        self.messages = build_catalogue(messages)

    def equals(self, equal_to: T) -> Validator[T]:
        """Value is equal to provided value with the default error message"""
        return self.base.equals(equal_to, message(self.messages, "equals", equal_to=equal_to))

    def not_equals(self, not_equal_to: T) -> Validator[T]:
        """Value is not equal to provided value with the default error message"""
        return self.base.not_equals(not_equal_to, message(self.messages, "not_equals", not_equal_to=not_equal_to))


class DefaultComparisonValidator(Generic[ComparableT]):
    """
    Decorates a `ComparisonValidator` with the default error messages.
    """

    def __init__(self, base: ComparisonValidator[ComparableT], messages: Optional[Mapping[str, str]] = None):
        self.base = base
        self.messages = build_catalogue(messages)
        self.equality = DefaultEqualityValidator(base.equality, self.messages)

    def equals(self, equal_to: ComparableT) -> Validator[ComparableT]:
        """Value is equal to provided value with the default error message"""
        return self.equality.equals(equal_to)

    def not_equals(self, not_equal_to: ComparableT) -> Validator[ComparableT]:
        """Value is not equal to provided value with the default error message"""
        return self.equality.not_equals(not_equal_to)

    def between(self, min_value: ComparableT, max_value: ComparableT) -> Validator[ComparableT]:
        """Value is inclusively between provided min and max with the default error message"""
        return self.base.between(
            min_value, max_value, message(self.messages, "between", min_value=min_value, max_value=max_value)
        )

    def greater_than(self, min_value: ComparableT) -> Validator[ComparableT]:
        """Value is greater than provided min with the default error message"""
        return self.base.greater_than(min_value, message(self.messages, "greater_than", min_value=min_value))

    def less_than(self, max_value: ComparableT) -> Validator[ComparableT]:
        """Value is less than provided max with the default error message"""
        return self.base.less_than(max_value, message(self.messages, "less_than", max_value=max_value))


class DefaultStringValidator:
    """
    Decorates a `StringValidator` with the default error messages.
    """

    def __init__(self, base: StringValidator, messages: Optional[Mapping[str, str]] = None):
        self.base = base
        self.messages = build_catalogue(messages)
        self.equality = DefaultEqualityValidator(base.equality, self.messages)

    def equals(self, equal_to: str) -> Validator[str]:
        """Value is equal to provided value with the default error message"""
        return self.equality.equals(equal_to)

    def not_equals(self, not_equal_to: str) -> Validator[str]:
        """Value is not equal to provided value with the default error message"""
        return self.equality.not_equals(not_equal_to)

    def between_len(self, min_len: int, max_len: int) -> Validator[str]:
        """Validate string is between length (inclusive) with the default error message"""
        return self.base.between_len(
            min_len, max_len, message(self.messages, "between_len", min_len=min_len, max_len=max_len)
        )

    def equals_len(self, length: int) -> Validator[str]:
        """Validate string length is equal to provided value with the default error message"""
        return self.base.equals_len(length, message(self.messages, "equals_len", length=length))

    def greater_than_len(self, min_len: int) -> Validator[str]:
        """Validate string length is greater than provided value with the default error message"""
        return self.base.greater_than_len(min_len, message(self.messages, "greater_than_len", min_len=min_len))

    def less_than_len(self, max_len: int) -> Validator[str]:
        """Validate string length is less than provided value with the default error message"""
        return self.base.less_than_len(max_len, message(self.messages, "less_than_len", max_len=max_len))

    def empty(self) -> Validator[str]:
        """Validate string is empty or whitespace only with the default error message"""
        return self.base.empty(message(self.messages, "empty"))

    def not_empty(self) -> Validator[str]:
        """Validate string is not empty or whitespace only with the default error message"""
        return self.base.not_empty(message(self.messages, "not_empty"))

    def pattern(self, regex: str | re.Pattern[str]) -> Validator[str]:
        """Validate string matches regular expression with the default error message"""
        regex_text = regex.pattern if isinstance(regex, re.Pattern) else regex
        return self.base.pattern(regex, message(self.messages, "pattern", regex=regex_text))


class DefaultGuidValidator:
    """
    Decorates a `GuidValidator` with the default error messages.
    """

    def __init__(self, base: GuidValidator, messages: Optional[Mapping[str, str]] = None):
        self.base = base
        self.messages = build_catalogue(messages)
        self.equality = DefaultEqualityValidator(base.equality, self.messages)

    def equals(self, equal_to: UUID) -> Validator[UUID]:
        """Value is equal to provided value with the default error message"""
        return self.equality.equals(equal_to)

    def not_equals(self, not_equal_to: UUID) -> Validator[UUID]:
        """Value is not equal to provided value with the default error message"""
        return self.equality.not_equals(not_equal_to)

    def empty(self) -> Validator[UUID]:
        """Validate UUID is the nil UUID with the default error message"""
        return self.base.empty(message(self.messages, "empty"))

    def not_empty(self) -> Validator[UUID]:
        """Validate UUID is not the nil UUID with the default error message"""
        return self.base.not_empty(message(self.messages, "not_empty"))


class DefaultCollectionValidator(Generic[T]):
    """
    Decorates a `CollectionValidator` with the default error messages.
    """

    def __init__(self, base: CollectionValidator[T], messages: Optional[Mapping[str, str]] = None):
        self.base = base
        self.messages = build_catalogue(messages)
        self.equality = DefaultEqualityValidator(base.equality, self.messages)

    def equals(self, equal_to: Collection[T]) -> Validator[Collection[T]]:
        """Collection is equal to provided collection with the default error message"""
        return self.equality.equals(equal_to)

    def not_equals(self, not_equal_to: Collection[T]) -> Validator[Collection[T]]:
        """Collection is not equal to provided collection with the default error message"""
        return self.equality.not_equals(not_equal_to)

    def between_len(self, min_len: int, max_len: int) -> Validator[Collection[T]]:
        """Number of elements is between min and max (inclusive) with the default error message"""
        return self.base.between_len(
            min_len, max_len, message(self.messages, "collection_between_len", min_len=min_len, max_len=max_len)
        )

    def equals_len(self, length: int) -> Validator[Collection[T]]:
        """Number of elements is equal to provided value with the default error message"""
        return self.base.equals_len(length, message(self.messages, "collection_equals_len", length=length))

    def greater_than_len(self, min_len: int) -> Validator[Collection[T]]:
        """Number of elements is greater than provided value with the default error message"""
        return self.base.greater_than_len(
            min_len, message(self.messages, "collection_greater_than_len", min_len=min_len)
        )

    def less_than_len(self, max_len: int) -> Validator[Collection[T]]:
        """Number of elements is less than provided value with the default error message"""
        return self.base.less_than_len(max_len, message(self.messages, "collection_less_than_len", max_len=max_len))

    def empty(self) -> Validator[Collection[T]]:
        """Collection has no elements with the default error message"""
        return self.base.empty(message(self.messages, "empty"))

    def not_empty(self) -> Validator[Collection[T]]:
        """Collection has at least one element with the default error message"""
        return self.base.not_empty(message(self.messages, "not_empty"))

    def exists(self, predicate: Callable[[T], bool]) -> Validator[Collection[T]]:
        """At least one element satisfies the predicate with the default error message"""
        return self.base.exists(predicate, message(self.messages, "exists"))