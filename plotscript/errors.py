from __future__ import annotations


class PlotScriptError(ValueError):
    pass


class InvalidLineWidth(PlotScriptError):
    def __init__(self, width: float) -> None:
        super().__init__(f"line width must be > 0, got {width!r}")
        self.width = width


class InvalidOpacity(PlotScriptError):
    def __init__(self, opacity: float) -> None:
        super().__init__(f"opacity must be in [0, 1], got {opacity!r}")
        self.opacity = opacity


class PlotDataError(PlotScriptError):
    pass
