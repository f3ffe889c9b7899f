from plotscript.api import figure
from plotscript.axis import AxisProperties, AxisRegistry
from plotscript.candlestick import CandlestickProperties, Candlesticks
from plotscript.config import ScriptSettings, validate_script_settings
from plotscript.data import DataTable
from plotscript.errors import InvalidLineWidth, InvalidOpacity, PlotDataError, PlotScriptError
from plotscript.figure import Figure
from plotscript.filledcurve import FilledCurve, FilledCurveProperties
from plotscript.key import KeyProperties
from plotscript.series import Plot, PlotElement
from plotscript.styles import (
    Axes,
    Axis,
    Color,
    Horizontal,
    Justification,
    LineType,
    Order,
    Position,
    Rgb,
    Stacked,
    Vertical,
)

__all__ = [
    "Axes",
    "Axis",
    "AxisProperties",
    "AxisRegistry",
    "CandlestickProperties",
    "Candlesticks",
    "Color",
    "DataTable",
    "Figure",
    "FilledCurve",
    "FilledCurveProperties",
    "Horizontal",
    "InvalidLineWidth",
    "InvalidOpacity",
    "Justification",
    "KeyProperties",
    "LineType",
    "Order",
    "Plot",
    "PlotDataError",
    "PlotElement",
    "PlotScriptError",
    "Position",
    "Rgb",
    "ScriptSettings",
    "Stacked",
    "Vertical",
    "figure",
    "validate_script_settings",
]
