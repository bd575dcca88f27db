"""
Contains the type check of the operands a validator family member is constructed with.
"""
from typing import Any

from typeguard import TypeCheckError, check_type

from validus.errors import ConfigurationError


def check_operands(member: str, expected_type: Any, **operands: Any) -> None:
    """
    Checks that every operand matches the value type of the family. A mismatch is a programmer error and raises
    a ConfigurationError naming the family member and the operand.
    """
    for operand_name, operand in operands.items():
        try:
            check_type(operand, expected_type)
        except TypeCheckError as error:
            raise ConfigurationError(f"{member}.{operand_name}: {error}") from error
