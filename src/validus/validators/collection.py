"""
Contains the CollectionValidator family for sized collections like lists, tuples and sets.
"""
from typing import Any, Callable, Collection, Generic, Optional

from validus import rules
from validus.types import T, ValidationMessage
from validus.validator import Validator

from .equality import EqualityValidator


class CollectionValidator(Generic[T]):
    """
    Validators for collections of elements of type `T`. The length members use the number of elements.
    """

    def __init__(self, element_type: Any = Any, equality: Optional[EqualityValidator[Collection[T]]] = None):
        self.element_type = element_type
        self.value_type = Collection[element_type]  # type: ignore[valid-type]
        self.equality: EqualityValidator[Collection[T]] = (
            equality if equality is not None else EqualityValidator(self.value_type)
        )

    def equals(self, equal_to: Collection[T], message: ValidationMessage) -> Validator[Collection[T]]:
        """Collection is equal to provided collection"""
        return self.equality.equals(equal_to, message)

    def not_equals(self, not_equal_to: Collection[T], message: ValidationMessage) -> Validator[Collection[T]]:
        """Collection is not equal to provided collection"""
        return self.equality.not_equals(not_equal_to, message)

    def between_len(self, min_len: int, max_len: int, message: ValidationMessage) -> Validator[Collection[T]]:
        """Number of elements is between min and max (inclusive)"""
        return Validator.create(message, rules.between_len(min_len, max_len), name=f"between_len({min_len}, {max_len})")

    def equals_len(self, length: int, message: ValidationMessage) -> Validator[Collection[T]]:
        """Number of elements is equal to provided value"""
        return Validator.create(message, rules.equals_len(length), name=f"equals_len({length})")

    def greater_than_len(self, min_len: int, message: ValidationMessage) -> Validator[Collection[T]]:
        """Number of elements is greater than provided value"""
        return Validator.create(message, rules.greater_than_len(min_len), name=f"greater_than_len({min_len})")

    def less_than_len(self, max_len: int, message: ValidationMessage) -> Validator[Collection[T]]:
        """Number of elements is less than provided value"""
        return Validator.create(message, rules.less_than_len(max_len), name=f"less_than_len({max_len})")

    def empty(self, message: ValidationMessage) -> Validator[Collection[T]]:
        """Collection has no elements"""
        return Validator.create(message, rules.equals_len(0), name="empty")

    def not_empty(self, message: ValidationMessage) -> Validator[Collection[T]]:
        """Collection has at least one element"""
        return Validator.create(message, rules.greater_than_len(0), name="not_empty")

    def exists(self, predicate: Callable[[T], bool], message: ValidationMessage) -> Validator[Collection[T]]:
        """At least one element satisfies the predicate"""
        return Validator.create(message, rules.exists(predicate), name=f"exists({getattr(predicate, '__name__', '')})")

    def __repr__(self):
        return f"CollectionValidator({getattr(self.element_type, '__name__', self.element_type)})"
