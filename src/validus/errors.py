"""
Contains the error report of a failed validation and the exceptions raised by this package.
"""
import itertools
from typing import Iterable, Iterator, Mapping, Optional

from frozendict import frozendict


class ValidusError(Exception):
    """
    Base class of all exceptions raised by this package.
    """


class ConfigurationError(ValidusError, ValueError):
    """
    Raised when a validator, rule or message catalogue is constructed with invalid arguments, e.g. an invalid
    regular expression, an operand of the wrong type or inverted bounds. This is always a programmer error and is
    never used to signal a violated rule.
    """


def _as_messages(field: str, messages: Iterable[str]) -> tuple[str, ...]:
    if isinstance(messages, str):
        raise ConfigurationError(f"{field}: messages must be a sequence of strings, not a single string")
    return tuple(messages)


class ValidationErrors:
    """
    An immutable mapping of field names onto the ordered messages of the rules they violated.
    Every operation returns a new instance.
    """

    __slots__ = ("_errors", "_flat")

    def __init__(self, errors: Optional[Mapping[str, Iterable[str]]] = None):
        self._errors: frozendict[str, tuple[str, ...]] = frozendict(
            (field, _as_messages(field, messages)) for field, messages in (errors or {}).items()
        )
        self._flat: Optional[tuple[str, ...]] = None

    @classmethod
    def empty(cls) -> "ValidationErrors":
        """An error report without any fields. This is the neutral element of `merge`."""
        return cls()

    @classmethod
    def create(cls, field: str, messages: Iterable[str]) -> "ValidationErrors":
        """
        Creates a report with exactly one field mapped onto the given messages.
        """
        messages = _as_messages(field, messages)
        if len(messages) == 0:
            raise ConfigurationError(f"{field}: an error report needs at least one message")
        return cls({field: messages})

    def merge(self, other: "ValidationErrors") -> "ValidationErrors":
        """
        Combines two reports. The key set of the result is the union of both key sets. If a field is present in both
        reports the messages of `self` precede the messages of `other`.
        """
        merged = dict(self._errors)
        for field, messages in other._errors.items():
            merged[field] = merged.get(field, ()) + messages
        return ValidationErrors(merged)

    def to_map(self) -> frozendict[str, tuple[str, ...]]:
        """Returns the raw mapping of field names onto their messages, e.g. for serialization"""
        return self._errors

    def to_list(self) -> list[str]:
        """
        Flattens all messages of all fields into one list. The fields are visited in lexicographic order, the messages
        of a single field keep their order.
        """
        if self._flat is None:
            self._flat = tuple(itertools.chain.from_iterable(self._errors[field] for field in self))
        return list(self._flat)

    def __getitem__(self, field: str) -> tuple[str, ...]:
        return self._errors[field]

    def __contains__(self, field: object) -> bool:
        return field in self._errors

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._errors))

    def __len__(self) -> int:
        return len(self._errors)

    def __eq__(self, other):
        return isinstance(other, ValidationErrors) and self._errors == other._errors

    def __ne__(self, other):
        return not isinstance(other, ValidationErrors) or self._errors != other._errors

    def __hash__(self):
        return hash(self._errors)

    def __repr__(self):
        return f"ValidationErrors({dict(self._errors)})"


class ValidationError(ValidusError):
    """
    Raised by `ValidationResult.unwrap` if the result is a failure. It carries the complete error report.
    """

    def __init__(self, errors: ValidationErrors):
        super().__init__("; ".join(errors.to_list()))
        self.errors = errors

    def __str__(self):
        return "\n".join(f"{field}: {message}" for field in self.errors for message in self.errors[field])
