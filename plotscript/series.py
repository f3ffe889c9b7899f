from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol

from plotscript.axis import AxisRegistry
from plotscript.data import DataTable


@dataclass(frozen=True)
class Plot:
    """One plotted element: its data block and the properties fragment that follows `'-' using ...`."""

    data: DataTable
    fragment: str

    def script(self) -> str:
        return f"'-' using {self.data.using()} {self.fragment}"


Configure = Optional[Callable[[Any], Any]]


class PlotElement(Protocol):
    def build(self, axes: AxisRegistry, configure: Configure = None) -> Plot:
        ...
