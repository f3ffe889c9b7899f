from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import re
from typing import Literal, Union

_HEX_COLOR = re.compile(r"^#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


class _Rendered(str, Enum):
    def display(self) -> str:
        return self.value


class Color(_Rendered):
    BLACK = "black"
    BLUE = "blue"
    CYAN = "cyan"
    DARK_VIOLET = "dark-violet"
    FOREST_GREEN = "forest-green"
    GOLD = "gold"
    GRAY = "gray"
    GREEN = "green"
    MAGENTA = "magenta"
    RED = "red"
    WHITE = "white"
    YELLOW = "yellow"


@dataclass(frozen=True)
class Rgb:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"Rgb channel `{name}` must be an int in [0, 255], got {value!r}")

    def display(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


ColorSpec = Union[Color, Rgb]


def coerce_color(value: ColorSpec | tuple[int, int, int] | str) -> ColorSpec:
    """Normalize user color input to a renderable `Color` or `Rgb`."""

    if isinstance(value, (Color, Rgb)):
        return value
    if isinstance(value, tuple):
        if len(value) != 3:
            raise ValueError(f"color tuple must be (r, g, b), got {value!r}")
        return Rgb(*value)
    if isinstance(value, str):
        match = _HEX_COLOR.match(value)
        if match is None:
            raise ValueError(f"color string must be #rrggbb, got {value!r}")
        return Rgb(*(int(part, 16) for part in match.groups()))
    raise ValueError(f"unsupported color input type: {type(value)!r}")


class LineType(_Rendered):
    DASH = "2"
    DOT = "3"
    DOT_DASH = "4"
    DOT_DOT_DASH = "5"
    SMALL_DOT = "0"
    SOLID = "1"


class Axis(_Rendered):
    BOTTOM_X = "x"
    LEFT_Y = "y"
    RIGHT_Y = "y2"
    TOP_X = "x2"


class Axes(_Rendered):
    BOTTOM_X_LEFT_Y = "x1y1"
    BOTTOM_X_RIGHT_Y = "x1y2"
    TOP_X_LEFT_Y = "x2y1"
    TOP_X_RIGHT_Y = "x2y2"

    def pair(self) -> tuple[Axis, Axis]:
        return _AXES_PAIRS[self]


_AXES_PAIRS: dict[Axes, tuple[Axis, Axis]] = {
    Axes.BOTTOM_X_LEFT_Y: (Axis.BOTTOM_X, Axis.LEFT_Y),
    Axes.BOTTOM_X_RIGHT_Y: (Axis.BOTTOM_X, Axis.RIGHT_Y),
    Axes.TOP_X_LEFT_Y: (Axis.TOP_X, Axis.LEFT_Y),
    Axes.TOP_X_RIGHT_Y: (Axis.TOP_X, Axis.RIGHT_Y),
}


class Horizontal(_Rendered):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class Vertical(_Rendered):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


class Justification(_Rendered):
    LEFT = "Left"
    RIGHT = "Right"


class Order(_Rendered):
    SAMPLE_TEXT = "reverse"
    TEXT_SAMPLE = "noreverse"


class Stacked(_Rendered):
    HORIZONTALLY = "horizontal"
    VERTICALLY = "vertical"


Placement = Literal["inside", "outside"]


@dataclass(frozen=True)
class Position:
    placement: Placement
    vertical: Vertical
    horizontal: Horizontal

    def __post_init__(self) -> None:
        if self.placement not in {"inside", "outside"}:
            raise ValueError(f"unsupported key placement: {self.placement}")
        object.__setattr__(self, "vertical", Vertical(self.vertical))
        object.__setattr__(self, "horizontal", Horizontal(self.horizontal))

    @classmethod
    def inside(cls, vertical: Vertical, horizontal: Horizontal) -> "Position":
        return cls(placement="inside", vertical=vertical, horizontal=horizontal)

    @classmethod
    def outside(cls, vertical: Vertical, horizontal: Horizontal) -> "Position":
        return cls(placement="outside", vertical=vertical, horizontal=horizontal)

    def display(self) -> str:
        return f"{self.placement} {self.vertical.display()} {self.horizontal.display()}"
