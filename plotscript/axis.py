from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Any, Callable, Iterator

from plotscript.scales import format_number, quote, single_line
from plotscript.styles import Axis


_SECONDARY_AXES = (Axis.TOP_X, Axis.RIGHT_Y)


@dataclass
class AxisProperties:
    _label: str | None = None
    _range: tuple[float, float] | None = None
    _scale_factor: float = 1.0
    _log_base: float | None = None
    _hidden: bool = False

    def label(self, text: str) -> "AxisProperties":
        self._label = single_line(text, field="label")
        return self

    def range(self, low: float, high: float) -> "AxisProperties":
        low_f = float(low)
        high_f = float(high)
        if not (math.isfinite(low_f) and math.isfinite(high_f)):
            raise ValueError("axis range bounds must be finite")
        self._range = (low_f, high_f)
        return self

    def scale_factor(self, factor: float) -> "AxisProperties":
        """Multiplier applied to raw values plotted against this axis.

        Useful for unit changes, e.g. `scale_factor(1e3)` to plot seconds as
        milliseconds without touching the data.
        """

        value = float(factor)
        if not math.isfinite(value) or value == 0.0:
            raise ValueError("axis scale factor must be finite and non-zero")
        self._scale_factor = value
        return self

    def logarithmic(self, base: float = 10.0) -> "AxisProperties":
        if base <= 1:
            raise ValueError("log base must be > 1")
        self._log_base = float(base)
        return self

    def hide(self) -> "AxisProperties":
        self._hidden = True
        return self

    def show(self) -> "AxisProperties":
        self._hidden = False
        return self

    @property
    def factor(self) -> float:
        return self._scale_factor

    def script(self, axis: Axis) -> str:
        name = axis.display()
        lines: list[str] = []
        if self._hidden:
            lines.append(f"unset {name}tics")
        elif axis in _SECONDARY_AXES:
            lines.append(f"set {name}tics")
        if self._label is not None:
            lines.append(f"set {name}label {quote(self._label)}")
        if self._range is not None:
            low, high = self._range
            lines.append(f"set {name}range [{format_number(low)}:{format_number(high)}]")
        if self._log_base is not None:
            lines.append(f"set logscale {name} {format_number(self._log_base)}")
        return "".join(line + "\n" for line in lines)


@dataclass
class AxisRegistry:
    """Figure-wide axis settings, looked up by every plotted element."""

    _axes: dict[Axis, AxisProperties] = field(default_factory=dict)

    def configure(self, axis: Axis, configure: Callable[[AxisProperties], Any]) -> AxisProperties:
        props = self._axes.setdefault(axis, AxisProperties())
        configure(props)
        return props

    def scale_factor(self, axis: Axis) -> float:
        props = self._axes.get(axis)
        return 1.0 if props is None else props.factor

    def __iter__(self) -> Iterator[tuple[Axis, AxisProperties]]:
        # Declaration order of `Axis`, not configuration order.
        for axis in Axis:
            props = self._axes.get(axis)
            if props is not None:
                yield axis, props

    def script(self) -> str:
        return "".join(props.script(axis) for axis, props in self)
