"""Input validation exceptions."""

from typing import Optional, Any
from .base import TailconfError

class ValidationError(TailconfError):
    """Base class for validation errors."""

    def __init__(
        self,
        message: str,
        *,
        field_name: Optional[str] = None,
        field_value: Optional[Any] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        if field_name:
            self.add_context('field_name', field_name)
        if field_value is not None:
            self.add_context('field_value', str(field_value))

    def _get_default_error_code(self) -> str:
        return "VALIDATION_ERROR"


class InputParseError(ValidationError):
    """Raised when the observation cannot be read from the input stream."""

    def __init__(self, raw_value: Optional[str], **kwargs):
        if raw_value is None:
            message = "No value found on input stream"
        else:
            message = f"Could not parse observation as a float: {raw_value!r}"
        super().__init__(message, field_name="observation", field_value=raw_value, **kwargs)
        self.add_suggestion("Pass a single number on standard input, e.g. 'echo 0.05 | tailconf'")

    def _get_default_error_code(self) -> str:
        return "INPUT_PARSE_FAILED"
