"""
Contains the types used in the validation framework
"""
from typing import TYPE_CHECKING, Any, Callable, Protocol, TypeAlias, TypeVar

if TYPE_CHECKING:
    from .results import ValidationResult


class Comparable(Protocol):
    """
    A protocol that defines the rich comparison methods needed for ordering rules.
    """

    def __lt__(self, other: Any) -> bool:
        ...

    def __le__(self, other: Any) -> bool:
        ...

    def __gt__(self, other: Any) -> bool:
        ...

    def __ge__(self, other: Any) -> bool:
        ...


T = TypeVar("T")
U = TypeVar("U")
ComparableT = TypeVar("ComparableT", bound=Comparable)

ValidationMessage: TypeAlias = Callable[[str], str]
"""Renders the message of a failed rule for the given field name"""
ValidationRule: TypeAlias = Callable[[T], bool]
"""A total predicate over the values of its domain"""
ValidatorFunction: TypeAlias = Callable[[str, T], "ValidationResult[T]"]
"""Given a field name and a value, produces a ValidationResult"""
