"""
Contains some useful utility functions to be used with validators.
"""
from .query_object import optional_field, required_field
