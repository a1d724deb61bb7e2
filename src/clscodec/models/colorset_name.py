"""ColorsetName model: the title of a color set."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer, model_validator

from clscodec.exceptions import NameTooLongError, UnencodableNameError

from .text import check_encodable, utf8_byte_len, weighted_char_count

MAX_COLORSET_NAME_BYTES = 192
MAX_COLORSET_NAME_CHARS = 64


def _check_limits(value: str) -> None:
    size = utf8_byte_len(value)
    if size > MAX_COLORSET_NAME_BYTES:
        raise NameTooLongError("colorset_name", "utf8_bytes", size, MAX_COLORSET_NAME_BYTES)

    count = weighted_char_count(value)
    if count > MAX_COLORSET_NAME_CHARS:
        raise NameTooLongError("colorset_name", "char_count", count, MAX_COLORSET_NAME_CHARS)


class ColorsetName(BaseModel):
    """Color set title.

    The file stores the title twice, once as UTF-8 and once as lossy
    Shift-JIS; UTF-8 is the authoritative copy. Two limits apply:

    - the UTF-8 form must be 192 bytes or less
    - at most 64 characters, where a 4-byte UTF-8 character counts as two
    """

    model_config = ConfigDict(validate_assignment=True, revalidate_instances="always")

    text: str = Field(default="", description="Title text")

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
        try:
            _check_limits(v)
        except NameTooLongError as e:
            raise ValueError(e.user_message) from e
        return v

    @model_serializer
    def _serialize(self) -> str:
        return self.text

    @classmethod
    def with_str(cls, value: str) -> "ColorsetName":
        cls.validate_str(value)
        return cls(text=value)

    @staticmethod
    def validate_str(value: str) -> None:
        """Check value against both limits without changing anything.

        Raises:
            UnencodableNameError: value contains a lone surrogate
            NameTooLongError: limit_kind is "utf8_bytes" or "char_count"
        """
        try:
            check_encodable(value)
        except ValueError as e:
            raise UnencodableNameError("colorset_name", str(e)) from e
        _check_limits(value)

    def set_str(self, value: str) -> None:
        """Replace the text. On failure the current text is kept."""
        self.validate_str(value)
        self.text = value

    @property
    def char_count(self) -> int:
        return weighted_char_count(self.text)

    def __str__(self) -> str:
        return self.text
