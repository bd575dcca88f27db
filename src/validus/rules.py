"""
Contains the validation rules. A rule is a pure predicate which is total over the values of its domain. Every
function in this module is a rule factory: it captures its operands and returns the predicate.
"""
import re
from typing import Any, Callable, Collection, Sized

from .errors import ConfigurationError
from .types import ComparableT, T, ValidationRule


def _check_bounds(min_value: Any, max_value: Any) -> None:
    if min_value > max_value:
        raise ConfigurationError(f"Lower bound {min_value!r} is greater than upper bound {max_value!r}")


def _check_length(length: int) -> None:
    if length < 0:
        raise ConfigurationError(f"Length {length!r} must not be negative")


def equality(equal_to: T) -> ValidationRule[T]:
    """Value is equal to `equal_to`"""
    return lambda value: value == equal_to


def inequality(not_equal_to: T) -> ValidationRule[T]:
    """Value is not equal to `not_equal_to`"""
    return lambda value: not value == not_equal_to


def between(min_value: ComparableT, max_value: ComparableT) -> ValidationRule[ComparableT]:
    """Value is inclusively between `min_value` and `max_value`"""
    _check_bounds(min_value, max_value)
    return lambda value: min_value <= value <= max_value


def greater_than(min_value: ComparableT) -> ValidationRule[ComparableT]:
    """Value is strictly greater than `min_value`"""
    return lambda value: value > min_value


def less_than(max_value: ComparableT) -> ValidationRule[ComparableT]:
    """Value is strictly less than `max_value`"""
    return lambda value: value < max_value


def between_len(min_len: int, max_len: int) -> ValidationRule[Sized]:
    """Length of the value is inclusively between `min_len` and `max_len`"""
    _check_length(min_len)
    _check_bounds(min_len, max_len)
    rule = between(min_len, max_len)
    return lambda value: rule(len(value))


def equals_len(length: int) -> ValidationRule[Sized]:
    """Length of the value is exactly `length`"""
    _check_length(length)
    rule = equality(length)
    return lambda value: rule(len(value))


def greater_than_len(min_len: int) -> ValidationRule[Sized]:
    """Length of the value is strictly greater than `min_len`"""
    _check_length(min_len)
    rule = greater_than(min_len)
    return lambda value: rule(len(value))


def less_than_len(max_len: int) -> ValidationRule[Sized]:
    """Length of the value is strictly less than `max_len`"""
    _check_length(max_len)
    rule = less_than(max_len)
    return lambda value: rule(len(value))


def pattern(regex: str | re.Pattern[str]) -> ValidationRule[str]:
    """
    The whole string matches the regular expression. A match of a substring is not sufficient.
    The expression is compiled once, an invalid expression raises a ConfigurationError.
    """
    try:
        compiled = re.compile(regex)
    except (re.error, TypeError) as error:
        raise ConfigurationError(f"Invalid regular expression {regex!r}: {error}") from error
    if not isinstance(compiled.pattern, str):
        raise ConfigurationError(f"Regular expression {regex!r} must be a text pattern")
    return lambda value: compiled.fullmatch(value) is not None


def blank(value: str) -> bool:
    """The string is empty or consists of whitespace only"""
    return len(value) == 0 or value.isspace()


def not_blank(value: str) -> bool:
    """The string contains at least one non-whitespace character"""
    return not blank(value)


def exists(predicate: Callable[[T], bool]) -> ValidationRule[Collection[T]]:
    """At least one element of the collection satisfies `predicate`"""
    return lambda value: any(predicate(element) for element in value)


def within(domain: Callable[[Any], bool], rule: ValidationRule[T]) -> ValidationRule[T]:
    """The value belongs to `domain` and satisfies `rule`. `rule` is only evaluated for values of the domain."""
    return lambda value: domain(value) and rule(value)


def aware(value: Any) -> bool:
    """The datetime carries a UTC offset"""
    return value.tzinfo is not None and value.utcoffset() is not None


def naive(value: Any) -> bool:
    """The datetime carries no UTC offset"""
    return not aware(value)
