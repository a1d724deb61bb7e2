"""ColorName model: the optional label attached to a palette entry."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer, model_validator

from clscodec.exceptions import NameTooLongError, UnencodableNameError

from .text import check_encodable, utf16_byte_len

MAX_COLOR_NAME_BYTES = 128


class ColorName(BaseModel):
    """Label stored as UTF-16LE, capped at 128 encoded bytes.

    Surrogate pairs count as two code units, so at most 32 characters
    outside the Basic Multilingual Plane fit.
    """

    model_config = ConfigDict(validate_assignment=True, revalidate_instances="always")

    text: str = Field(default="", description="Label text")

    @model_validator(mode="before")
    @classmethod
    def _accept_plain_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"text": data}
        return data

    @field_validator("text")
    @classmethod
    def _validate_text(cls, v: str) -> str:
        check_encodable(v)
        size = utf16_byte_len(v)
        if size > MAX_COLOR_NAME_BYTES:
            raise ValueError(f"encodes to {size} bytes in UTF-16 (max {MAX_COLOR_NAME_BYTES})")
        return v

    @model_serializer
    def _serialize(self) -> str:
        return self.text

    @classmethod
    def with_str(cls, value: str) -> "ColorName":
        """Create a name, raising NameTooLongError if value does not fit."""
        cls.validate_str(value)
        return cls(text=value)

    @staticmethod
    def validate_str(value: str) -> None:
        """Check value against the length rule without changing anything.

        Raises:
            UnencodableNameError: If value contains a lone surrogate
            NameTooLongError: If value encodes to more than 128 UTF-16 bytes
        """
        try:
            check_encodable(value)
        except ValueError as e:
            raise UnencodableNameError("color_name", str(e)) from e

        size = utf16_byte_len(value)
        if size > MAX_COLOR_NAME_BYTES:
            raise NameTooLongError("color_name", "utf16_bytes", size, MAX_COLOR_NAME_BYTES)

    def set_str(self, value: str) -> None:
        """Replace the text. On failure the current text is kept."""
        self.validate_str(value)
        self.text = value

    @property
    def byte_len_utf16(self) -> int:
        """Encoded size of the text, excluding the length header."""
        return utf16_byte_len(self.text)

    def __str__(self) -> str:
        return self.text
