"""
Contains functions to query values of nested payloads by dotted paths. A path segment is looked up as a key if the
current object is a mapping (e.g. a parsed JSON payload or a form) and as an attribute otherwise.
"""
from typing import Any, Mapping, Optional


def _lookup(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        try:
            return obj[name]
        except KeyError as error:
            raise AttributeError(name) from error
    return getattr(obj, name)


def required_field(obj: Any, attribute_path: str) -> Any:
    """
    Tries to query the `obj` with the provided `attribute_path`. If it is not existent,
    an AttributeError naming the path up to the missing segment will be raised.
    """
    current_obj: Any = obj
    splitted_path = attribute_path.split(".")
    for index, attr_name in enumerate(splitted_path):
        try:
            current_obj = _lookup(current_obj, attr_name)
        except AttributeError as error:
            current_path = ".".join(splitted_path[0 : index + 1])
            raise AttributeError(f"{current_path}: Not found") from error
    return current_obj


def optional_field(obj: Any, attribute_path: str) -> Optional[Any]:
    """
    Tries to query the `obj` with the provided `attribute_path`. If it is not existent, `None` will be returned.
    """
    try:
        return required_field(obj, attribute_path)
    except AttributeError:
        return None
