from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Any, Callable

from plotscript.axis import AxisProperties, AxisRegistry
from plotscript.config import DEFAULT_SETTINGS, ScriptSettings
from plotscript.key import KeyProperties
from plotscript.scales import quote, single_line
from plotscript.series import Configure, Plot, PlotElement
from plotscript.styles import Axis


LOGGER = logging.getLogger(__name__)


@dataclass
class Figure:
    """Owns everything one gnuplot script is generated from.

    Plot elements are appended in call order and written out in that order;
    the axis registry is shared by every element so scale factors stay
    consistent across the figure.
    """

    settings: ScriptSettings = DEFAULT_SETTINGS
    axes: AxisRegistry = field(default_factory=AxisRegistry)
    plots: list[Plot] = field(default_factory=list)
    key: KeyProperties | None = None
    title: str | None = None
    output: str | None = None

    def plot(self, element: PlotElement, configure: Configure = None) -> "Figure":
        built = element.build(self.axes, configure)
        self.plots.append(built)
        LOGGER.debug(
            "appended %s plot #%d (%d rows)",
            type(element).__name__,
            len(self.plots),
            built.data.nrows,
        )
        return self

    def configure_key(self, configure: Callable[[KeyProperties], Any]) -> "Figure":
        if self.key is None:
            self.key = KeyProperties()
        configure(self.key)
        return self

    def configure_axis(self, axis: Axis, configure: Callable[[AxisProperties], Any]) -> "Figure":
        self.axes.configure(Axis(axis), configure)
        return self

    def set_title(self, title: str | None) -> "Figure":
        self.title = None if title is None else single_line(title, field="title")
        return self

    def set_output(self, output: str | Path | None) -> "Figure":
        self.output = None if output is None else single_line(output, field="output path")
        return self

    def script(self) -> str:
        out = self.settings.script()
        if self.output is not None:
            out += f"set output {quote(self.output)}\n"
        if self.title is not None:
            out += f"set title {quote(self.title)}\n"
        out += self.axes.script()
        if self.key is not None:
            out += self.key.script()
        if not self.plots:
            return out

        out += "plot " + ", ".join(plot.script() for plot in self.plots) + "\n"
        for plot in self.plots:
            out += plot.data.data_block()
        return out

    def save(self, path: str | Path) -> Path:
        target = Path(path)
        target.write_text(self.script(), encoding="utf-8")
        LOGGER.debug("wrote gnuplot script to %s", target)
        return target
