"""
Contains the entry point combining the validation results of independent fields into one result of a composite value.
"""
import logging
from typing import Any, Callable

from .results import Success, ValidationResult
from .types import U

logger = logging.getLogger(__name__)


def validate(
    constructor: Callable[..., U], *results: ValidationResult[Any], **named_results: ValidationResult[Any]
) -> ValidationResult[U]:
    """
    Combines already evaluated validation results into one result of `constructor(*values, **named_values)`.
    The constructor is only called if every result is a `Success`. Otherwise, the error reports of all failed results
    are merged in the order of the arguments, positional before keyword arguments. E.g.:
    ```
    result = validate(
        Person,
        name=Default.String.between_len(3, 64)("Name", form.name),
        age=Default.Int.greater_than(0)("Age", form.age),
    )
    ```
    Since Python evaluates all arguments before the call, every field validator has been executed.
    """
    keywords = tuple(named_results.keys())
    combined: ValidationResult[tuple[Any, ...]] = Success(())
    for result in (*results, *named_results.values()):
        combined = ValidationResult.zip(combined, result).map(lambda pair: (*pair[0], pair[1]))
    if combined.is_failure:
        logger.debug(
            "Validation of %s failed for field(s) %s",
            getattr(constructor, "__name__", constructor),
            list(combined.errors_or_none() or ()),
        )
        return combined  # type: ignore[return-value]

    def construct(values: tuple[Any, ...]) -> U:
        positional = values[: len(results)]
        return constructor(*positional, **dict(zip(keywords, values[len(results) :])))

    return combined.map(construct)
