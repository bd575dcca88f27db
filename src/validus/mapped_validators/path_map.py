"""
Contains a PathMappedValidator which gets the values of the fields from a nested payload in a very simple way and
combines their validation results into one result of a composite value.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Mapping, Optional

from frozendict import frozendict

from validus.errors import ConfigurationError
from validus.execution import validate
from validus.results import ValidationResult
from validus.types import U
from validus.utils.query_object import optional_field
from validus.validator import Validator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MappedField:
    """
    Describes where a value is found in the payload and how it is validated. `field` is the name used in the error
    report and defaults to `path`. A missing value is passed to the validator as None, so wrap it with `required`
    or `optional`.
    """

    path: str
    validator: Validator[Any]
    field: Optional[str] = None

    @property
    def field_name(self) -> str:
        """The name of the field in the error report"""
        return self.field if self.field is not None else self.path


class PathMappedValidator(Generic[U]):
    """
    This mapped validator class is for the "every day" usage. It simply queries the payload by the given paths,
    validates every value and passes the validated values as keyword arguments to `constructor`. Every field is
    validated, the errors of all fields get collected.
    """

    def __init__(
        self,
        constructor: Callable[..., U],
        field_map: Mapping[str, MappedField] | frozendict[str, MappedField],
    ):
        self.constructor = constructor
        self.field_map: frozendict[str, MappedField] = (
            field_map if isinstance(field_map, frozendict) else frozendict(field_map)
        )
        self._validate_field_map()

    def _validate_field_map(self):
        """
        Checks if the field map is usable.
        """
        name = getattr(self.constructor, "__name__", repr(self.constructor))
        if len(self.field_map) == 0:
            raise ConfigurationError(f"{name}: the field map must not be empty")
        for param_name, mapped_field in self.field_map.items():
            if not isinstance(mapped_field, MappedField):
                raise ConfigurationError(f"{name}: parameter '{param_name}' is not mapped by a MappedField")

    def __eq__(self, other):
        return (
            isinstance(other, PathMappedValidator)
            and self.constructor == other.constructor
            and self.field_map == other.field_map
        )

    def __ne__(self, other):
        return (
            not isinstance(other, PathMappedValidator)
            or self.constructor != other.constructor
            or self.field_map != other.field_map
        )

    def __hash__(self):
        return hash(self.field_map) + hash(self.constructor)

    def __str__(self):
        name = getattr(self.constructor, "__name__", repr(self.constructor))
        return f"PathMappedValidator({name}, {dict((key, value.path) for key, value in self.field_map.items())})"

    def validate(self, data_set: Any) -> ValidationResult[U]:
        """
        Queries every mapped path of `data_set`, validates the values and combines the results.
        """
        results: dict[str, ValidationResult[Any]] = {}
        for param_name, mapped_field in self.field_map.items():
            value = optional_field(data_set, mapped_field.path)
            results[param_name] = mapped_field.validator(mapped_field.field_name, value)
        logger.debug("%s validated %d field(s)", self, len(results))
        return validate(self.constructor, **results)

    def __call__(self, data_set: Any) -> ValidationResult[U]:
        return self.validate(data_set)
