"""
Error types shared by the request builder, the generation service and the
form controllers.
"""
from typing import Dict, Optional


class StudioError(Exception):
    """Base class for all film studio errors."""


class ValidationError(StudioError):
    """Raw form input failed field-level validation."""

    def __init__(self, field_errors: Dict[str, str]):
        self.field_errors = dict(field_errors)
        super().__init__("; ".join(f"{k}: {v}" for k, v in self.field_errors.items()))


class ReadError(StudioError):
    """An uploaded file could not be read or encoded."""


class GenerationFailure(StudioError):
    """The generation backend failed or returned unusable output."""

    def __init__(self, message: str, template_name: Optional[str] = None):
        self.template_name = template_name
        super().__init__(message)


class SchemaValidationError(GenerationFailure):
    """Backend output could not be parsed into the declared response schema."""

    def __init__(self, message: str, template_name: Optional[str] = None, raw_response: str = ""):
        self.raw_response = raw_response
        super().__init__(message, template_name)
