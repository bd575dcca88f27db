"""
Contains the ComparisonValidator family for totally ordered types like numbers, dates and durations.
"""
from typing import Any, Callable, Generic, Optional

from validus import rules
from validus.errors import ConfigurationError
from validus.types import ComparableT, ValidationMessage, ValidationRule
from validus.validator import Validator

from .equality import EqualityValidator
from .operands import check_operands


class ComparisonValidator(Generic[ComparableT]):
    """
    Validators for any totally ordered type. The equality members are delegated to an `EqualityValidator` of the
    same value type.
    `domain` optionally narrows the value type to a totally ordered subset, e.g. timezone aware datetimes. Operands
    outside the domain raise a ConfigurationError, values outside the domain fail the ordering rules.
    """

    def __init__(
        self,
        value_type: Any = Any,
        equality: Optional[EqualityValidator[ComparableT]] = None,
        domain: Optional[Callable[[Any], bool]] = None,
    ):
        self.value_type = value_type
        self.domain = domain
        self.equality: EqualityValidator[ComparableT] = (
            equality if equality is not None else EqualityValidator(value_type)
        )

    def _check_domain(self, member: str, **operands: Any) -> None:
        check_operands(member, self.value_type, **operands)
        if self.domain is None:
            return
        for operand_name, operand in operands.items():
            if not self.domain(operand):
                raise ConfigurationError(
                    f"{member}.{operand_name}: {operand!r} is outside the domain {self.domain.__name__}"
                )

    def _within_domain(self, rule: ValidationRule[ComparableT]) -> ValidationRule[ComparableT]:
        if self.domain is None:
            return rule
        return rules.within(self.domain, rule)

    def equals(self, equal_to: ComparableT, message: ValidationMessage) -> Validator[ComparableT]:
        """Value is equal to provided value"""
        self._check_domain("equals", equal_to=equal_to)
        return self.equality.equals(equal_to, message)

    def not_equals(self, not_equal_to: ComparableT, message: ValidationMessage) -> Validator[ComparableT]:
        """Value is not equal to provided value"""
        self._check_domain("not_equals", not_equal_to=not_equal_to)
        return self.equality.not_equals(not_equal_to, message)

    def between(
        self, min_value: ComparableT, max_value: ComparableT, message: ValidationMessage
    ) -> Validator[ComparableT]:
        """Value is inclusively between provided min and max"""
        self._check_domain("between", min_value=min_value, max_value=max_value)
        rule = self._within_domain(rules.between(min_value, max_value))
        return Validator.create(message, rule, name=f"between({min_value}, {max_value})")

    def greater_than(self, min_value: ComparableT, message: ValidationMessage) -> Validator[ComparableT]:
        """Value is greater than provided min"""
        self._check_domain("greater_than", min_value=min_value)
        rule = self._within_domain(rules.greater_than(min_value))
        return Validator.create(message, rule, name=f"greater_than({min_value})")

    def less_than(self, max_value: ComparableT, message: ValidationMessage) -> Validator[ComparableT]:
        """Value is less than provided max"""
        self._check_domain("less_than", max_value=max_value)
        rule = self._within_domain(rules.less_than(max_value))
        return Validator.create(message, rule, name=f"less_than({max_value})")

    def __repr__(self):
        return f"ComparisonValidator({getattr(self.value_type, '__name__', self.value_type)})"
