"""
Validation-specific exception classes.

Use these exceptions for problems detected before any call to
Microsoft Graph is made.
"""
from .base import ValidationError


class MissingFlagError(ValidationError):
    """A required command-line flag has no value"""

    def __init__(self, flag: str):
        super().__init__(f"--{flag} is required", flag)
        self.code = "MISSING_FLAG"


class InvalidRunDataError(ValidationError):
    """The workflow engine handed a phase run data of the wrong type"""

    def __init__(self, data: object):
        super().__init__(f"invalid data type {type(data).__name__}", "data")
        self.code = "INVALID_RUN_DATA"
