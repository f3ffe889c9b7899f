from __future__ import annotations

import math
from typing import TYPE_CHECKING

from plotscript.errors import PlotScriptError
from plotscript.styles import Axes

if TYPE_CHECKING:
    from plotscript.axis import AxisRegistry


def scale_factor(registry: "AxisRegistry", axes: Axes) -> tuple[float, float]:
    x_axis, y_axis = axes.pair()
    return registry.scale_factor(x_axis), registry.scale_factor(y_axis)


def format_number(value: float) -> str:
    """Render a number the way gnuplot reads it back: `2` not `2.0`, `0.5` stays `0.5`."""

    v = float(value)
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "Inf" if v > 0 else "-Inf"
    if v.is_integer() and abs(v) < 1e16:
        return str(int(v))
    return repr(v)


def quote(text: str) -> str:
    # gnuplot escapes a single quote inside a single-quoted string by doubling it.
    return "'" + str(text).replace("'", "''") + "'"


def single_line(text: str, *, field: str) -> str:
    """Return `text` as a string, rejecting line breaks that would split the script line."""

    value = str(text)
    if "\n" in value or "\r" in value:
        raise PlotScriptError(f"{field} must not contain line breaks: {value!r}")
    return value
