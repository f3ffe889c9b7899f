from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping

from plotscript.scales import format_number, quote


DEFAULT_ASPECT_RATIO = 16.0 / 9.0


@dataclass(frozen=True)
class ScriptSettings:
    """Terminal-level settings written at the top of every figure script."""

    terminal: str = "svg"
    width: int = 1280
    height: int = 720
    font_family: str = "Helvetica"
    font_size: float = 12.0

    def script(self) -> str:
        font = quote(f"{self.font_family},{format_number(self.font_size)}")
        return f"set terminal {self.terminal} size {self.width}, {self.height} font {font}\n"


DEFAULT_SETTINGS = ScriptSettings()


def validate_script_settings(overrides: Mapping[str, Any] | None = None) -> ScriptSettings:
    """Merge `overrides` over the defaults, rejecting unknown keys and bad values."""

    raw: dict[str, Any] = asdict(DEFAULT_SETTINGS)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown script setting: {key}")
            raw[key] = value

    terminal = raw["terminal"]
    if not isinstance(terminal, str) or not terminal.strip() or any(ch.isspace() for ch in terminal.strip()):
        raise ValueError("Setting `terminal` must be a single non-empty word")

    for key in ("width", "height"):
        value = raw[key]
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError(f"Setting `{key}` must be a positive integer")

    if not isinstance(raw["font_family"], str) or not raw["font_family"].strip():
        raise ValueError("Setting `font_family` must be a non-empty string")

    size = raw["font_size"]
    if isinstance(size, bool) or not isinstance(size, (int, float)) or float(size) <= 0:
        raise ValueError("Setting `font_size` must be a positive number")

    return ScriptSettings(
        terminal=terminal.strip(),
        width=int(raw["width"]),
        height=int(raw["height"]),
        font_family=str(raw["font_family"]),
        font_size=float(size),
    )

