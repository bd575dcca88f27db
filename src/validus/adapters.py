"""
Contains adapters which lift a validator over an optional value. An absent value is represented by None.
"""
import logging
from typing import Optional

from .errors import ValidationErrors
from .results import Failure, Success, ValidationResult
from .types import T, ValidationMessage
from .validator import Validator

logger = logging.getLogger(__name__)


def optional(validator: Validator[T]) -> Validator[Optional[T]]:
    """
    Executes `validator` if the value is present. An absent value is never a violation and results in `Success(None)`.
    """

    def validate(field: str, value: Optional[T]) -> ValidationResult[Optional[T]]:
        if value is None:
            logger.debug("Optional field %s is absent, skipping %s", field, validator.name)
            return Success(None)
        return validator(field, value)

    return Validator(validate, name=f"optional({validator.name})")


def required(validator: Validator[T], message: ValidationMessage) -> Validator[Optional[T]]:
    """
    Executes `validator` if the value is present. Its errors are passed through unchanged.
    An absent value fails with `message(field)`.
    """

    def validate(field: str, value: Optional[T]) -> ValidationResult[T]:
        if value is None:
            logger.debug("Required field %s is absent", field)
            return Failure(ValidationErrors.create(field, [message(field)]))
        return validator(field, value)

    return Validator(validate, name=f"required({validator.name})")  # type: ignore[arg-type]
