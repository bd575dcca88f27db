"""
This package enables you to validate untrusted input field by field. Validators are combined such that you get
either the validated value or a report of every violated rule of every field.
"""

from .adapters import optional, required
from .default import Default, DefaultValidators
from .errors import ConfigurationError, ValidationError, ValidationErrors, ValidusError
from .execution import validate
from .mapped_validators import MappedField, PathMappedValidator
from .results import Failure, Success, ValidationResult
from .validator import Validator
