"""
Contains validators which query their values from a payload before validating them.
"""
from .path_map import MappedField, PathMappedValidator
