"""Errors raised while loading a codec configuration file."""

from typing import Any, Optional

from .base import ClsCodecError

_FIELD_HINTS = {
    "strict_magic": "Use true or false",
    "default_colorset_name": "Names are limited to 192 UTF-8 bytes and 64 characters",
    "fallback_colorset_name": "Names are limited to 192 UTF-8 bytes and 64 characters",
}


class ConfigurationError(ClsCodecError):
    """Codec configuration could not be loaded or saved."""


class ConfigFileInvalidError(ConfigurationError):
    """Configuration file is not parseable JSON."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Args:
            file_path: File that failed to parse
            parse_error: Parser message, usually with line and column
        """
        if "trailing comma" in parse_error.lower():
            user_msg = "Configuration file has a trailing comma"
            recovery = f"Delete the comma after the last entry in {file_path}"
        else:
            user_msg = "Configuration file is not valid JSON"
            recovery = f"Fix the JSON syntax in {file_path}, or delete it to use the defaults"

        super().__init__(
            user_message=user_msg,
            technical_message=f"Cannot parse {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """Configuration file parsed but holds a value the codec rejects."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: Optional[str] = None):
        """
        Args:
            field: Dotted location of the bad value
            value: The rejected value (None when several fields failed)
            error_msg: Validator message
            file_path: File the value came from, if any
        """
        hints = [f"Correct '{field}'" + (f" in {file_path}" if file_path else "")]
        if field in _FIELD_HINTS:
            hints.append(_FIELD_HINTS[field])

        super().__init__(
            user_message=f"Invalid configuration value for '{field}': {error_msg}",
            technical_message=f"{field}={value!r} rejected: {error_msg}",
            recoverable=True,
            recovery_hint="\n".join(hints),
        )
        self.field = field
        self.value = value
        self.file_path = file_path
