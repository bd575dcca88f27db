"""
Contains the catalogue of default message templates. A template is a `str.format` template which may use the
placeholder `{field}` and the operands of the validator it belongs to.
"""
import string
from typing import Any, Mapping, Optional

from frozendict import frozendict

from validus.errors import ConfigurationError
from validus.types import ValidationMessage

DEFAULT_MESSAGES: frozendict[str, str] = frozendict(
    {
        "equals": "{field} must be equal to {equal_to}",
        "not_equals": "{field} must not equal {not_equal_to}",
        "between": "{field} must be between {min_value} and {max_value}",
        "greater_than": "{field} must be greater than {min_value}",
        "less_than": "{field} must be less than {max_value}",
        "between_len": "{field} must be between {min_len} and {max_len} characters",
        "equals_len": "{field} must be {length} characters",
        "greater_than_len": "{field} must be more than {min_len} characters",
        "less_than_len": "{field} must be fewer than {max_len} characters",
        "pattern": "{field} must match pattern {regex}",
        "empty": "{field} must be empty",
        "not_empty": "{field} must not be empty",
        "collection_between_len": "{field} must contain between {min_len} and {max_len} items",
        "collection_equals_len": "{field} must contain {length} items",
        "collection_greater_than_len": "{field} must contain more than {min_len} items",
        "collection_less_than_len": "{field} must contain fewer than {max_len} items",
        "exists": "{field} must contain a matching item",
        "required": "{field} is required",
    }
)

# the placeholders every template may use besides `{field}`
TEMPLATE_OPERANDS: frozendict[str, frozenset[str]] = frozendict(
    {
        "equals": frozenset({"equal_to"}),
        "not_equals": frozenset({"not_equal_to"}),
        "between": frozenset({"min_value", "max_value"}),
        "greater_than": frozenset({"min_value"}),
        "less_than": frozenset({"max_value"}),
        "between_len": frozenset({"min_len", "max_len"}),
        "equals_len": frozenset({"length"}),
        "greater_than_len": frozenset({"min_len"}),
        "less_than_len": frozenset({"max_len"}),
        "pattern": frozenset({"regex"}),
        "empty": frozenset(),
        "not_empty": frozenset(),
        "collection_between_len": frozenset({"min_len", "max_len"}),
        "collection_equals_len": frozenset({"length"}),
        "collection_greater_than_len": frozenset({"min_len"}),
        "collection_less_than_len": frozenset({"max_len"}),
        "exists": frozenset(),
        "required": frozenset(),
    }
)


def _check_template(key: str, template: str, allowed: frozenset[str]) -> None:
    """
    Checks every replacement field of `template`, including the fields nested in format specs. Only the names in
    `allowed` may be used, without attribute or index access. Positional fields like `{}` or `{0}` are rejected.
    """
    for _, name, format_spec, conversion in string.Formatter().parse(template):
        if name is None:
            continue
        if name not in allowed:
            raise ConfigurationError(f"{key}: template uses unknown placeholder {name!r}")
        if conversion not in (None, "s", "r", "a"):
            raise ConfigurationError(f"{key}: template uses unknown conversion {conversion!r}")
        if format_spec:
            _check_template(key, format_spec, allowed)


def build_catalogue(overrides: Optional[Mapping[str, str]] = None) -> frozendict[str, str]:
    """
    Returns the default catalogue updated by `overrides`. Every key of `overrides` must be a known template key and
    every template may only use `{field}` and the operands of its validator. Otherwise, a ConfigurationError
    is raised.
    """
    if not overrides:
        return DEFAULT_MESSAGES
    unknown_keys = set(overrides.keys()) - set(DEFAULT_MESSAGES.keys())
    if unknown_keys:
        raise ConfigurationError(f"Unknown message template(s) {sorted(unknown_keys)}")
    for key, template in overrides.items():
        try:
            _check_template(key, template, TEMPLATE_OPERANDS[key] | {"field"})
        except ConfigurationError:
            raise
        except ValueError as error:
            raise ConfigurationError(f"{key}: invalid template {template!r}: {error}") from error
    return frozendict({**DEFAULT_MESSAGES, **overrides})


def message(catalogue: Mapping[str, str], key: str, **operands: Any) -> ValidationMessage:
    """
    Returns a message function rendering the template `key` with the given operands and the field name.
    """
    template = catalogue[key]
    return lambda field: template.format(field=field, **operands)
