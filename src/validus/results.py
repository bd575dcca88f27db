"""
Contains the ValidationResult type which represents a choice between success and failure, together with the
operators defining how results are combined.
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Iterable, Optional

from .errors import ValidationError, ValidationErrors
from .types import T, U


class ValidationResult(ABC, Generic[T]):
    """
    The outcome of a validation. It is either a `Success` holding the validated value or a `Failure` holding the
    complete error report. Use the classmethods to combine independent results.
    Results compare equal by their content and, like the mutable values they may hold, are not hashable.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def is_success(self) -> bool:
        """True if this is a `Success`"""

    @property
    def is_failure(self) -> bool:
        """True if this is a `Failure`"""
        return not self.is_success

    @abstractmethod
    def map(self, func: Callable[[T], U]) -> "ValidationResult[U]":
        """
        Applies `func` to the value of a `Success`. A `Failure` is returned unchanged.
        """

    @abstractmethod
    def bind(self, func: Callable[[T], "ValidationResult[U]"]) -> "ValidationResult[U]":
        """
        Feeds the value of a `Success` into `func`. A `Failure` is returned unchanged and `func` is not called.
        Note that this short-circuits: use `apply` or `zip` if you want to collect the errors of independent results.
        """

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the value of a `Success` or raises a `ValidationError` carrying the error report of a `Failure`.
        """

    @abstractmethod
    def errors_or_none(self) -> Optional[ValidationErrors]:
        """Returns the error report of a `Failure` or None"""

    @abstractmethod
    def flatten(self) -> T | list[str]:
        """
        Returns the value of a `Success` or the flattened messages (see `ValidationErrors.to_list`) of a `Failure`.
        """

    @staticmethod
    def retn(value: T) -> "ValidationResult[T]":
        """Wraps a plain value into a `Success`"""
        return Success(value)

    @staticmethod
    def create(condition: bool, value: T, errors: ValidationErrors) -> "ValidationResult[T]":
        """Returns `Success(value)` if `condition` holds and `Failure(errors)` otherwise"""
        if condition:
            return Success(value)
        return Failure(errors)

    @staticmethod
    def apply(
        result_func: "ValidationResult[Callable[[T], U]]", result: "ValidationResult[T]"
    ) -> "ValidationResult[U]":
        """
        Applies a wrapped function to a wrapped value. If both results failed, their error reports get merged with the
        errors of `result_func` first. This is where independent failures are accumulated.
        """
        if isinstance(result_func, Success):
            if isinstance(result, Success):
                return Success(result_func.value(result.value))
            return result  # type: ignore[return-value]
        assert isinstance(result_func, Failure)
        if isinstance(result, Failure):
            return Failure(result_func.errors.merge(result.errors))
        return result_func

    @staticmethod
    def zip(result1: "ValidationResult[T]", result2: "ValidationResult[U]") -> "ValidationResult[tuple[T, U]]":
        """
        Pairs two results into one result of a tuple. If both results failed, their error reports get merged with the
        errors of `result1` first.
        """
        if isinstance(result1, Success) and isinstance(result2, Success):
            return Success((result1.value, result2.value))
        if isinstance(result1, Failure) and isinstance(result2, Failure):
            return Failure(result1.errors.merge(result2.errors))
        if isinstance(result1, Failure):
            return result1
        return result2  # type: ignore[return-value]

    @staticmethod
    def sequence(items: Iterable["ValidationResult[T]"]) -> "ValidationResult[tuple[T, ...]]":
        """
        Turns an iterable of results into a result of a tuple. The items are folded from left to right. The first
        `Failure` is kept and the errors of all following failures are dropped. If you need every error of every
        item, combine them using `zip` or `validus.validate` instead.
        """
        values: list[Any] = []
        for item in items:
            if isinstance(item, Failure):
                return item
            assert isinstance(item, Success)
            values.append(item.value)
        return Success(tuple(values))


class Success(ValidationResult[T]):
    """
    A successful validation holding the validated value.
    """

    __slots__ = ("value",)
    __match_args__ = ("value",)

    def __init__(self, value: T):
        self.value = value

    @property
    def is_success(self) -> bool:
        return True

    def map(self, func: Callable[[T], U]) -> ValidationResult[U]:
        return Success(func(self.value))

    def bind(self, func: Callable[[T], ValidationResult[U]]) -> ValidationResult[U]:
        return func(self.value)

    def unwrap(self) -> T:
        return self.value

    def errors_or_none(self) -> Optional[ValidationErrors]:
        return None

    def flatten(self) -> T:
        return self.value

    def __eq__(self, other):
        return isinstance(other, Success) and self.value == other.value

    def __ne__(self, other):
        return not isinstance(other, Success) or self.value != other.value

    def __repr__(self):
        return f"Success({self.value!r})"


class Failure(ValidationResult[Any]):
    """
    A failed validation holding the complete error report.
    """

    __slots__ = ("errors",)
    __match_args__ = ("errors",)

    def __init__(self, errors: ValidationErrors):
        self.errors = errors

    @property
    def is_success(self) -> bool:
        return False

    def map(self, func: Callable[[Any], U]) -> ValidationResult[U]:
        return self

    def bind(self, func: Callable[[Any], ValidationResult[U]]) -> ValidationResult[U]:
        return self

    def unwrap(self) -> Any:
        raise ValidationError(self.errors)

    def errors_or_none(self) -> Optional[ValidationErrors]:
        return self.errors

    def flatten(self) -> list[str]:
        return self.errors.to_list()

    def __eq__(self, other):
        return isinstance(other, Failure) and self.errors == other.errors

    def __ne__(self, other):
        return not isinstance(other, Failure) or self.errors != other.errors

    def __repr__(self):
        return f"Failure({self.errors!r})"
