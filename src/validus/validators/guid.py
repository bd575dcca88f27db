"""
Contains the GuidValidator family for UUIDs.
"""
from typing import Optional
from uuid import UUID

from validus import rules
from validus.types import ValidationMessage
from validus.validator import Validator

from .equality import EqualityValidator

NIL_UUID = UUID(int=0)


class GuidValidator:
    """
    Validators for UUIDs. A UUID is considered empty if it equals the nil UUID `00000000-0000-0000-0000-000000000000`.
    """

    value_type = UUID

    def __init__(self, equality: Optional[EqualityValidator[UUID]] = None):
        self.equality: EqualityValidator[UUID] = equality if equality is not None else EqualityValidator(UUID)

    def equals(self, equal_to: UUID, message: ValidationMessage) -> Validator[UUID]:
        """Value is equal to provided value"""
        return self.equality.equals(equal_to, message)

    def not_equals(self, not_equal_to: UUID, message: ValidationMessage) -> Validator[UUID]:
        """Value is not equal to provided value"""
        return self.equality.not_equals(not_equal_to, message)

    def empty(self, message: ValidationMessage) -> Validator[UUID]:
        """Validate UUID is the nil UUID"""
        return Validator.create(message, rules.equality(NIL_UUID), name="empty")

    def not_empty(self, message: ValidationMessage) -> Validator[UUID]:
        """Validate UUID is not the nil UUID"""
        return Validator.create(message, rules.inequality(NIL_UUID), name="not_empty")

    def __repr__(self):
        return "GuidValidator()"
