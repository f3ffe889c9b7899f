from __future__ import annotations

from dataclasses import dataclass, replace

from plotscript.scales import quote, single_line
from plotscript.styles import Justification, Order, Position, Stacked


@dataclass
class KeyProperties:
    """Legend settings of a figure.

    Modified through `Figure.configure_key`. The key is shown and unboxed by
    default; every other field is left to gnuplot until set.
    """

    _boxed: bool = False
    _hidden: bool = False
    _justification: Justification | None = None
    _order: Order | None = None
    _position: Position | None = None
    _stacked: Stacked | None = None
    _title: str | None = None

    def hide(self) -> "KeyProperties":
        self._hidden = True
        return self

    def show(self) -> "KeyProperties":
        self._hidden = False
        return self

    def boxed(self, boxed: bool) -> "KeyProperties":
        self._boxed = bool(boxed)
        return self

    def justification(self, justification: Justification) -> "KeyProperties":
        self._justification = Justification(justification)
        return self

    def order(self, order: Order) -> "KeyProperties":
        self._order = Order(order)
        return self

    def position(self, position: Position) -> "KeyProperties":
        if not isinstance(position, Position):
            raise ValueError(f"key position must be a Position, got {type(position)!r}")
        self._position = position
        return self

    def stacked(self, stacked: Stacked) -> "KeyProperties":
        self._stacked = Stacked(stacked)
        return self

    def title(self, title: str) -> "KeyProperties":
        self._title = single_line(title, field="key title")
        return self

    @property
    def hidden(self) -> bool:
        return self._hidden

    def copy(self) -> "KeyProperties":
        return replace(self)

    def script(self) -> str:
        if self._hidden:
            return "set key off\n"

        out = "set key on "
        if self._position is not None:
            out += self._position.display() + " "
        if self._stacked is not None:
            out += self._stacked.display() + " "
        if self._justification is not None:
            out += self._justification.display() + " "
        if self._order is not None:
            out += self._order.display() + " "
        if self._title is not None:
            out += f"title {quote(self._title)} "
        if self._boxed:
            out += "box "
        return out + "\n"
