"""
Helpers that sit around the places clscodec raises.

- ``ErrorContext`` logs how an operation ended and lets the error continue
- ``wrap_pydantic_error`` turns a config ValidationError into a ConfigurationError
- ``format_error_for_display`` splits any exception into message and hint

```python
with ErrorContext("decode color set", logger_instance=logger):
    colorset = decode_colorset(reader, config)
```
"""

import logging
from typing import Any, Optional

from pydantic import ValidationError

from .base import ClsCodecError
from .config import ConfigFileInvalidError, ConfigValidationError

logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Log the outcome of a block of work.

    Codec errors describe bad input and are logged as warnings with their
    technical message. Anything else is a bug and is logged with a
    traceback. The exception is re-raised unless ``re_raise`` is False, in
    which case it is kept on ``error``.
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True
    ):
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[BaseException] = None

    def __enter__(self) -> "ErrorContext":
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_val is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val
        if isinstance(exc_val, ClsCodecError):
            self.logger.warning(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=True)
        return not self.re_raise


def _location(err: dict[str, Any]) -> str:
    return ".".join(str(part) for part in err.get("loc", ())) or "unknown"


def wrap_pydantic_error(error: Exception, file_path: str) -> ClsCodecError:
    """
    Convert an error from ``model_validate_json`` into a ConfigurationError.

    JSON syntax problems become ConfigFileInvalidError; field problems
    become ConfigValidationError naming the field (or "multiple fields").
    """
    if not isinstance(error, ValidationError):
        return ConfigValidationError("unknown", None, str(error), file_path)

    errors = error.errors()
    syntax = [err for err in errors if err.get("type") == "json_invalid"]
    if syntax:
        return ConfigFileInvalidError(file_path, syntax[0].get("msg", str(error)))

    if len(errors) == 1:
        err = errors[0]
        return ConfigValidationError(_location(err), err.get("input"), err.get("msg", "invalid"), file_path)

    summary = "\n".join(f"  - {_location(err)}: {err.get('msg', 'invalid')}" for err in errors)
    return ConfigValidationError(
        "multiple fields", None, f"{len(errors)} validation errors:\n{summary}", file_path
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """Return (message, recovery hint or None) for showing to a user."""
    if isinstance(error, ClsCodecError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None
