from __future__ import annotations

from typing import Any

from plotscript.config import DEFAULT_ASPECT_RATIO, validate_script_settings
from plotscript.figure import Figure


def figure(
    width: int | None = None,
    height: int | None = None,
    *,
    aspect_ratio: float = DEFAULT_ASPECT_RATIO,
    title: str | None = None,
    output: str | None = None,
    **settings: Any,
) -> Figure:
    if aspect_ratio <= 0:
        raise ValueError("aspect_ratio must be > 0")
    if width is None and height is not None:
        if height <= 0:
            raise ValueError("height must be > 0")
        width = max(1, int(round(height * aspect_ratio)))
    elif width is not None and height is None:
        if width <= 0:
            raise ValueError("width must be > 0")
        height = max(1, int(round(width / aspect_ratio)))
    if width is not None:
        settings["width"] = width
    if height is not None:
        settings["height"] = height
    fig = Figure(settings=validate_script_settings(settings))
    return fig.set_title(title).set_output(output)
