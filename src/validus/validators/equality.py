"""
Contains the EqualityValidator family which is the building block of all other families.
"""
from typing import Any, Generic

from validus import rules
from validus.types import T, ValidationMessage
from validus.validator import Validator

from .operands import check_operands


class EqualityValidator(Generic[T]):
    """
    Validators for any type supporting equality.
    """

    def __init__(self, value_type: Any = Any):
        self.value_type = value_type

    def equals(self, equal_to: T, message: ValidationMessage) -> Validator[T]:
        """Value is equal to provided value"""
        check_operands("equals", self.value_type, equal_to=equal_to)
        return Validator.create(message, rules.equality(equal_to), name=f"equals({equal_to!r})")

    def not_equals(self, not_equal_to: T, message: ValidationMessage) -> Validator[T]:
        """Value is not equal to provided value"""
        check_operands("not_equals", self.value_type, not_equal_to=not_equal_to)
        return Validator.create(message, rules.inequality(not_equal_to), name=f"not_equals({not_equal_to!r})")

    def __repr__(self):
        return f"{type(self).__name__}({getattr(self.value_type, '__name__', self.value_type)})"
