from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Any, Callable

from plotscript.axis import AxisRegistry
from plotscript.data import DataTable
from plotscript.errors import InvalidLineWidth
from plotscript.scales import format_number, quote, scale_factor, single_line
from plotscript.series import Plot
from plotscript.styles import Axes, ColorSpec, LineType, coerce_color


@dataclass
class CandlestickProperties:
    _color: ColorSpec | None = None
    _label: str | None = None
    _line_type: LineType = LineType.SOLID
    _line_width: float | None = None

    def color(self, color: ColorSpec | tuple[int, int, int] | str) -> "CandlestickProperties":
        self._color = coerce_color(color)
        return self

    def label(self, text: str) -> "CandlestickProperties":
        self._label = single_line(text, field="label")
        return self

    def line_type(self, lt: LineType) -> "CandlestickProperties":
        """Solid lines unless changed."""

        self._line_type = LineType(lt)
        return self

    def line_width(self, lw: float) -> "CandlestickProperties":
        width = float(lw)
        if not math.isfinite(width) or width <= 0:
            raise InvalidLineWidth(lw)
        self._line_width = width
        return self

    def script(self) -> str:
        parts = ["with candlesticks", f"lt {self._line_type.display()}"]
        if self._line_width is not None:
            parts.append(f"lw {format_number(self._line_width)}")
        if self._color is not None:
            parts.append(f"lc rgb {quote(self._color.display())}")
        if self._label is not None:
            parts.append(f"title {quote(self._label)}")
        else:
            parts.append("notitle")
        return " ".join(parts)


@dataclass(frozen=True, eq=False)
class Candlesticks:
    """A box spanning `box_min..box_high` with whiskers out to `whisker_min`/`whisker_high`."""

    x: Any
    whisker_min: Any
    box_min: Any
    box_high: Any
    whisker_high: Any

    def build(
        self,
        axes: AxisRegistry,
        configure: Callable[[CandlestickProperties], Any] | None = None,
    ) -> Plot:
        x_factor, y_factor = scale_factor(axes, Axes.BOTTOM_X_LEFT_Y)
        # gnuplot's candlesticks style reads x:box_min:whisker_min:whisker_high:box_high.
        data = DataTable.from_columns(
            (self.x, self.box_min, self.whisker_min, self.whisker_high, self.box_high),
            (x_factor, y_factor, y_factor, y_factor, y_factor),
        )
        props = CandlestickProperties()
        if configure is not None:
            configure(props)
        return Plot(data=data, fragment=props.script())
