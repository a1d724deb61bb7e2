"""JSON files for pydantic models.

Only the codec configuration goes through here. Color set files are bytes
and the codec leaves reading and writing them to the caller.

Writes go to ``<name>.tmp`` and are renamed into place, and the previous
file is copied to ``<name>.bak`` first.
"""

import logging
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import Optional, TypeVar

from pydantic import BaseModel, ValidationError

from clscodec.exceptions import ConfigFileInvalidError, ConfigurationError, wrap_pydantic_error

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _sibling(path: Path, suffix: str) -> Path:
    return path.with_suffix(path.suffix + suffix)


class PydanticPersistence:
    """Stateless load/save helpers shared by the configuration models."""

    @staticmethod
    def load_json(path: Path, model_type: type[M]) -> M:
        """
        Read and validate a model.

        Raises:
            FileNotFoundError: path does not exist
            ConfigFileInvalidError: the file is empty, unreadable or not JSON
            ConfigValidationError: the JSON does not fit model_type
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigFileInvalidError(str(path), f"cannot read file: {e}") from e

        if not text.strip():
            raise ConfigFileInvalidError(str(path), "File is empty")

        try:
            model = model_type.model_validate_json(text)
        except ValidationError as e:
            logger.error(f"Rejected {model_type.__name__} from {path}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Loaded {model_type.__name__} from {path}")
        return model

    @staticmethod
    def save_json(data: BaseModel, path: Path, indent: int = 2, backup: bool = True) -> None:
        """
        Write a model atomically, creating parent directories as needed.

        Raises:
            OSError: The file system refused the write
            ConfigurationError: The model could not be serialized
        """
        try:
            content = data.model_dump_json(indent=indent)
        except ValueError as e:
            raise ConfigurationError(
                user_message=f"Failed to save configuration to {path}",
                technical_message=f"Cannot serialize {type(data).__name__}: {e}",
            ) from e

        path.parent.mkdir(parents=True, exist_ok=True)
        if backup and path.exists():
            shutil.copy2(path, _sibling(path, ".bak"))

        temp_path = _sibling(path, ".tmp")
        try:
            temp_path.write_text(content, encoding="utf-8")
            temp_path.replace(path)
        except OSError as e:
            logger.error(f"Could not write {path}: {e}")
            raise
        finally:
            temp_path.unlink(missing_ok=True)

        logger.debug(f"Saved {type(data).__name__} to {path}")

    @staticmethod
    def load_json_or_default(
        path: Path, model_type: type[M], default_factory: Optional[Callable[[], M]] = None
    ) -> M:
        """Like load_json, but a missing file yields a default instance.

        A file that exists and is invalid still raises.
        """
        try:
            return PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            logger.info(f"{path} not found, using default {model_type.__name__}")
            return default_factory() if default_factory else model_type()
