"""ColorSegment model: one entry of a color set."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .color import Color
from .color_name import ColorName


class ColorSegment(BaseModel):
    """A color with an optional name.

    Two segments are equal when their colors are equal and they either both
    lack a name or carry equal names.

    The color and name are copied when a segment is built, so segments
    never share them.
    """

    model_config = ConfigDict(validate_assignment=True, revalidate_instances="always")

    color: Color = Field(default_factory=Color, description="Entry color")
    name: ColorName | None = Field(default=None, description="Optional label")

    @classmethod
    def new(cls, color: Color, name: Optional[ColorName] = None) -> "ColorSegment":
        return cls(color=color, name=name)

    @classmethod
    def with_values(
        cls,
        red: int,
        green: int,
        blue: int,
        transparent: bool = False,
        name: Optional[str] = None,
    ) -> "ColorSegment":
        """Build a segment from raw values.

        Raises:
            NameTooLongError: If name does not fit in 128 UTF-16 bytes
        """
        color = Color.new(red, green, blue, transparent)
        color_name = ColorName.with_str(name) if name is not None else None
        return cls(color=color, name=color_name)

    @property
    def has_name(self) -> bool:
        return self.name is not None

    def set_name(self, value: Optional[str]) -> None:
        """Attach, replace or (with None) remove the name.

        An existing name is updated in place so a rejected value leaves it
        untouched.
        """
        if value is None:
            self.name = None
        elif self.name is None:
            self.name = ColorName.with_str(value)
        else:
            self.name.set_str(value)
