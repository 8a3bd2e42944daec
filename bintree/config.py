from typing import Optional

from colr import InvalidColr, color
from pydantic import BaseModel, Field, validator


class PrinterConfig(BaseModel):
    """Settings for drawing trees as text with #TreeRenderer"""

    # Character columns per layout unit. When unset it is derived from the
    # widest label so that neighboring labels never touch. A value too narrow
    # for the widest label is raised to the narrowest safe width.
    unit_x: Optional[int] = Field(None, ge=2)
    # Rows from a parent label to its children's labels. The rows between
    # them hold the "/" and "\" connectors.
    unit_y: int = Field(2, ge=2)
    # Labels longer than this are cut short and end with "…"
    max_label_width: int = Field(24, ge=2)
    # Foreground color for node labels, any name colr understands (e.g. "green")
    color: Optional[str] = None
    style: str = "bright"

    @validator("color")
    def check_color(cls, value):
        if value is not None:
            try:
                color("", fore=value)
            except InvalidColr as error:
                raise ValueError(f"unknown color: {value}") from error
        return value

    @validator("style")
    def check_style(cls, value):
        try:
            color("", style=value)
        except InvalidColr as error:
            raise ValueError(f"unknown style: {value}") from error
        return value
