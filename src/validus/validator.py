"""
Contains the Validator class. A validator binds a rule and a message into a reusable unit which validates a value
of a named field.
"""
import logging
from typing import Generic, Optional

from .errors import ValidationErrors
from .results import Failure, Success, ValidationResult
from .types import T, ValidationMessage, ValidationRule, ValidatorFunction

logger = logging.getLogger(__name__)


class Validator(Generic[T]):
    """
    Wraps a validator function `(field, value) -> ValidationResult`. Validators are immutable and can be called
    any number of times, e.g.:
    ```
    validate_name = Validator.create(lambda field: f"{field} must not be empty", lambda value: value.strip() != "")
    assert validate_name("Name", "Alice") == Success("Alice")
    ```
    """

    __slots__ = ("func", "name")

    def __init__(self, func: ValidatorFunction[T], name: Optional[str] = None):
        self.func = func
        self.name: str = name if name is not None else getattr(func, "__name__", repr(func))

    @classmethod
    def create(cls, message: ValidationMessage, rule: ValidationRule[T], name: Optional[str] = None) -> "Validator[T]":
        """
        Creates a validator which succeeds with the unchanged value if `rule` holds. Otherwise, it fails with an
        error report containing `message(field)` for the validated field.
        """
        rule_name = name if name is not None else getattr(rule, "__name__", "<anonymous>")

        def validate(field: str, value: T) -> ValidationResult[T]:
            if rule(value):
                return Success(value)
            logger.debug("Rule %s failed for field %s", rule_name, field)
            return Failure(ValidationErrors.create(field, [message(field)]))

        return cls(validate, name=rule_name)

    def compose(self, other: "Validator[T]") -> "Validator[T]":
        """
        Combines two validators of the same value. Both validators are always executed. If both fail, their error
        reports get merged with the errors of `self` first. If both succeed, the value validated by `self` is returned.
        """

        def validate(field: str, value: T) -> ValidationResult[T]:
            return ValidationResult.zip(self(field, value), other(field, value)).map(lambda pair: pair[0])

        return Validator(validate, name=f"{self.name} & {other.name}")

    def __and__(self, other: "Validator[T]") -> "Validator[T]":
        return self.compose(other)

    def __call__(self, field: str, value: T) -> ValidationResult[T]:
        return self.func(field, value)

    def __eq__(self, other):
        return isinstance(other, Validator) and self.func == other.func

    def __ne__(self, other):
        return not isinstance(other, Validator) or self.func != other.func

    def __hash__(self):
        return hash(self.func)

    def __str__(self):
        return f"Validator({self.name})"

    def __repr__(self):
        return str(self)
