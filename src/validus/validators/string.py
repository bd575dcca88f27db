"""
Contains the StringValidator family.
"""
import re
from typing import Optional

from validus import rules
from validus.types import ValidationMessage
from validus.validator import Validator

from .equality import EqualityValidator


class StringValidator:
    """
    Validators for strings. Besides the equality members (delegated to an `EqualityValidator[str]`) it validates
    the length, the emptiness and regular expression matches.
    """

    value_type = str

    def __init__(self, equality: Optional[EqualityValidator[str]] = None):
        self.equality: EqualityValidator[str] = equality if equality is not None else EqualityValidator(str)

    def equals(self, equal_to: str, message: ValidationMessage) -> Validator[str]:
        """Value is equal to provided value"""
        return self.equality.equals(equal_to, message)

    def not_equals(self, not_equal_to: str, message: ValidationMessage) -> Validator[str]:
        """Value is not equal to provided value"""
        return self.equality.not_equals(not_equal_to, message)

    def between_len(self, min_len: int, max_len: int, message: ValidationMessage) -> Validator[str]:
        """Validate string is between length (inclusive)"""
        return Validator.create(message, rules.between_len(min_len, max_len), name=f"between_len({min_len}, {max_len})")

    def equals_len(self, length: int, message: ValidationMessage) -> Validator[str]:
        """Validate string length is equal to provided value"""
        return Validator.create(message, rules.equals_len(length), name=f"equals_len({length})")

    def greater_than_len(self, min_len: int, message: ValidationMessage) -> Validator[str]:
        """Validate string length is greater than provided value"""
        return Validator.create(message, rules.greater_than_len(min_len), name=f"greater_than_len({min_len})")

    def less_than_len(self, max_len: int, message: ValidationMessage) -> Validator[str]:
        """Validate string length is less than provided value"""
        return Validator.create(message, rules.less_than_len(max_len), name=f"less_than_len({max_len})")

    def empty(self, message: ValidationMessage) -> Validator[str]:
        """Validate string is empty or whitespace only"""
        return Validator.create(message, rules.blank, name="empty")

    def not_empty(self, message: ValidationMessage) -> Validator[str]:
        """Validate string contains at least one non-whitespace character"""
        return Validator.create(message, rules.not_blank, name="not_empty")

    def pattern(self, regex: str | re.Pattern[str], message: ValidationMessage) -> Validator[str]:
        """Validate the whole string matches the regular expression"""
        regex_text = regex.pattern if isinstance(regex, re.Pattern) else regex
        return Validator.create(message, rules.pattern(regex), name=f"pattern({regex_text!r})")

    def __repr__(self):
        return "StringValidator()"
