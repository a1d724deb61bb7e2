"""Codec configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from clscodec.exceptions import NameTooLongError, UnencodableNameError
from clscodec.persistence import PydanticPersistence

from .colorset_name import ColorsetName


class CodecConfig(BaseModel):
    """Policy settings for reading and creating color sets."""

    strict_magic: bool = Field(
        default=True,
        description=(
            "Reject files whose 6-byte header is not the .cls magic. "
            "When false the header is skipped unchecked and a warning is logged."
        ),
    )
    default_colorset_name: str = Field(
        default="NewColorset", description="Name given to a freshly created color set"
    )
    fallback_colorset_name: str = Field(
        default="UserColorset", description="Name used when a color set is renamed to an empty string"
    )

    @field_validator("default_colorset_name", "fallback_colorset_name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Names must satisfy the same limits as any colorset name."""
        try:
            ColorsetName.validate_str(v)
        except (NameTooLongError, UnencodableNameError) as e:
            raise ValueError(e.user_message) from e
        return v

    @classmethod
    def load_or_default(cls, path: Path) -> "CodecConfig":
        """
        Load config from a JSON file, or return defaults if it does not exist.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path) -> None:
        """Save config to file (atomic, keeps a .bak of the previous file)."""
        PydanticPersistence.save_json(self, path)
