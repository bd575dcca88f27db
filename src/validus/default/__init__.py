"""
Contains the validator families decorated with default error messages. Use the `Default` instance for the built-in
messages or create your own `DefaultValidators` with overridden templates, e.g.:
```
validators = DefaultValidators(messages={"required": "Please fill in {field}"})
validate_name = validators.required(validators.String.between_len(3, 64))
```
"""
from typing import Mapping, Optional

from validus import validators
from validus.adapters import optional, required
from validus.types import T
from validus.validator import Validator

from .families import (
    DefaultCollectionValidator,
    DefaultComparisonValidator,
    DefaultEqualityValidator,
    DefaultGuidValidator,
    DefaultStringValidator,
)
from .messages import DEFAULT_MESSAGES, build_catalogue, message


# pylint: disable=invalid-name,too-many-instance-attributes
class DefaultValidators:
    """
    Bundles one default decorated family per ready-made instance of `validus.validators`.
    """

    def __init__(self, messages: Optional[Mapping[str, str]] = None):
        self.messages = build_catalogue(messages)
        self.DateTime = DefaultComparisonValidator(validators.DateTime, self.messages)
        self.DateTimeOffset = DefaultComparisonValidator(validators.DateTimeOffset, self.messages)
        self.Decimal = DefaultComparisonValidator(validators.Decimal, self.messages)
        self.Float = DefaultComparisonValidator(validators.Float, self.messages)
        self.Guid = DefaultGuidValidator(validators.Guid, self.messages)
        self.Int = DefaultComparisonValidator(validators.Int, self.messages)
        self.Int16 = DefaultComparisonValidator(validators.Int16, self.messages)
        self.Int64 = DefaultComparisonValidator(validators.Int64, self.messages)
        self.String = DefaultStringValidator(validators.String, self.messages)
        self.TimeSpan = DefaultComparisonValidator(validators.TimeSpan, self.messages)
        self.Collection = DefaultCollectionValidator(validators.Collection, self.messages)

    def required(self, validator: Validator[T]) -> Validator[Optional[T]]:
        """
        Executes `validator` if the value is present, otherwise fails with the default error message.
        """
        return required(validator, message(self.messages, "required"))

    @staticmethod
    def optional(validator: Validator[T]) -> Validator[Optional[T]]:
        """
        Executes `validator` if the value is present, otherwise succeeds.
        """
        return optional(validator)


Default = DefaultValidators()
