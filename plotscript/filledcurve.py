from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Any, Callable

from plotscript.axis import AxisRegistry
from plotscript.data import DataTable
from plotscript.errors import InvalidOpacity
from plotscript.scales import format_number, quote, scale_factor, single_line
from plotscript.series import Plot
from plotscript.styles import Axes, ColorSpec, coerce_color


DEFAULT_AXES = Axes.BOTTOM_X_LEFT_Y


@dataclass
class FilledCurveProperties:
    _axes: Axes | None = None
    _color: ColorSpec | None = None
    _label: str | None = None
    _opacity: float | None = None

    def axes(self, axes: Axes) -> "FilledCurveProperties":
        self._axes = Axes(axes)
        return self

    def color(self, color: ColorSpec | tuple[int, int, int] | str) -> "FilledCurveProperties":
        self._color = coerce_color(color)
        return self

    def label(self, text: str) -> "FilledCurveProperties":
        self._label = single_line(text, field="label")
        return self

    def opacity(self, opacity: float) -> "FilledCurveProperties":
        """Fill opacity in `[0, 1]`; gnuplot fills fully opaque when unset."""

        value = float(opacity)
        if math.isnan(value) or not 0.0 <= value <= 1.0:
            raise InvalidOpacity(opacity)
        self._opacity = value
        return self

    @property
    def effective_axes(self) -> Axes:
        return self._axes if self._axes is not None else DEFAULT_AXES

    def script(self) -> str:
        parts: list[str] = []
        if self._axes is not None:
            parts.append(f"axes {self._axes.display()}")
        parts.append("with filledcurves")
        parts.append("fillstyle")
        if self._opacity is not None:
            parts.append(f"solid {format_number(self._opacity)}")
        # TODO: expose the border style once a caller needs something other than noborder.
        parts.append("noborder")
        if self._color is not None:
            parts.append(f"lc rgb {quote(self._color.display())}")
        if self._label is not None:
            parts.append(f"title {quote(self._label)}")
        else:
            parts.append("notitle")
        return " ".join(parts)


@dataclass(frozen=True, eq=False)
class FilledCurve:
    """Area between the curves `(x, y1)` and `(x, y2)`."""

    x: Any
    y1: Any
    y2: Any

    def build(
        self,
        axes: AxisRegistry,
        configure: Callable[[FilledCurveProperties], Any] | None = None,
    ) -> Plot:
        props = FilledCurveProperties()
        if configure is not None:
            configure(props)

        # Scale factors depend on the configured axis pair.
        x_factor, y_factor = scale_factor(axes, props.effective_axes)
        data = DataTable.from_columns((self.x, self.y1, self.y2), (x_factor, y_factor, y_factor))
        return Plot(data=data, fragment=props.script())
