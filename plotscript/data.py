from __future__ import annotations

from collections.abc import Iterable, Sized
from dataclasses import dataclass
import itertools
import logging
from typing import Any, Sequence

import numpy as np

from plotscript.adapters import coerce_series
from plotscript.scales import format_number


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class DataTable:
    """Row-oriented block of scaled coordinates, one column per plotted quantity."""

    values: np.ndarray

    def __post_init__(self) -> None:
        if self.values.ndim != 2:
            raise ValueError("DataTable values must have shape (rows, cols)")

    @classmethod
    def from_columns(cls, columns: Sequence[Any], factors: Sequence[float]) -> "DataTable":
        if not columns:
            raise ValueError("DataTable needs at least one column")
        if len(columns) != len(factors):
            raise ValueError(f"expected {len(columns)} scale factors, got {len(factors)}")

        arrays = _coerce_columns(columns)
        lengths = [arr.size for arr in arrays]
        nrows = min(lengths)
        if any(n != nrows for n in lengths):
            LOGGER.debug("truncating data table columns %s to %d rows", lengths, nrows)

        values = np.empty((nrows, len(arrays)), dtype=np.float64)
        for j, (arr, factor) in enumerate(zip(arrays, factors)):
            values[:, j] = arr[:nrows] * float(factor)
        return cls(values=values)

    @property
    def nrows(self) -> int:
        return int(self.values.shape[0])

    @property
    def ncols(self) -> int:
        return int(self.values.shape[1])

    def rows(self) -> list[tuple[float, ...]]:
        return [tuple(float(v) for v in row) for row in self.values.tolist()]

    def using(self) -> str:
        return ":".join(str(i) for i in range(1, self.ncols + 1))

    def data_block(self) -> str:
        lines = [" ".join(format_number(v) for v in row) for row in self.values.tolist()]
        lines.append("e")
        return "\n".join(lines) + "\n"


def _coerce_columns(columns: Sequence[Any]) -> list[np.ndarray]:
    # Columns without a length are zipped lazily and never pulled past the shortest column.
    arrays: dict[int, np.ndarray] = {}
    lazy: list[int] = []
    for i, col in enumerate(columns):
        if isinstance(col, Sized) or not isinstance(col, Iterable):
            arrays[i] = coerce_series(col, label=f"column {i + 1}")
        else:
            lazy.append(i)

    if lazy:
        limit = min((arr.size for arr in arrays.values()), default=None)
        rows = list(itertools.islice(zip(*(columns[i] for i in lazy)), limit))
        for pos, i in enumerate(lazy):
            arrays[i] = coerce_series([row[pos] for row in rows], label=f"column {i + 1}")

    return [arrays[i] for i in range(len(columns))]
