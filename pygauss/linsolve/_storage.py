"""
Dense matrix and vector storage for elimination.

DenseMatrix keeps its values in one contiguous (n, n) buffer and addresses
rows through an indirection vector. Logical row k lives in physical row
perm[k], so exchanging two rows swaps two integers and never copies row
contents. DenseVector is a plain length-n buffer whose swap exchanges two
elements.

No bounds checking beyond NumPy's own: the engine never indexes outside
[0, n).
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray


def _as_buffer(array: NDArray, copy: bool) -> NDArray[np.float64]:
    """float64 C-contiguous buffer; shares memory with `array` when copy=False and possible."""
    if copy:
        return np.array(array, dtype=np.float64, order='C', copy=True)
    return np.ascontiguousarray(array, dtype=np.float64)


class DenseMatrix:
    """
    Square float64 matrix with O(1) row exchange.

    Attributes exposed:
        n: dimension
        data: the physical buffer (rows in physical order)
        perm: logical-to-physical row map (read by the engine, mutated only
            through swap_rows)
    """

    def __init__(self, data: NDArray[np.float64]):
        if data.ndim != 2 or data.shape[0] != data.shape[1]:
            raise ValueError(f"DenseMatrix needs a square 2D buffer, got shape {data.shape}")
        self._data = data
        self._n = data.shape[0]
        self._perm = np.arange(self._n, dtype=np.intp)

    @classmethod
    def from_array(cls, array: NDArray[Any], copy: bool = True) -> DenseMatrix:
        """Wrap `array`; with copy=False a float64 C-contiguous input is used in place."""
        return cls(_as_buffer(array, copy))

    @property
    def n(self) -> int:
        return self._n

    @property
    def data(self) -> NDArray[np.float64]:
        return self._data

    @property
    def perm(self) -> NDArray[np.intp]:
        return self._perm

    @property
    def permutation(self) -> NDArray[np.intp]:
        """Copy of the current logical row order (original row index per position)."""
        return self._perm.copy()

    def row(self, k: int) -> NDArray[np.float64]:
        """Writable view of logical row k."""
        return self._data[self._perm[k]]

    def rows(self, start: int, stop: int) -> NDArray[np.intp]:
        """Physical indices of logical rows [start, stop)."""
        return self._perm[start:stop]

    def __getitem__(self, index: tuple[int, int]) -> float:
        r, c = index
        return float(self._data[self._perm[r], c])

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        r, c = index
        self._data[self._perm[r], c] = value

    def swap_rows(self, a: int, b: int) -> None:
        """Exchange logical rows a and b by swapping their handles."""
        if a != b:
            self._perm[a], self._perm[b] = self._perm[b], self._perm[a]

    def to_array(self) -> NDArray[np.float64]:
        """Copy of the matrix in logical row order."""
        return self._data[self._perm]

    def __repr__(self) -> str:
        return f"DenseMatrix(n={self._n})"


class DenseVector:
    """Length-n float64 vector with O(1) element exchange."""

    def __init__(self, data: NDArray[np.float64]):
        if data.ndim != 1:
            raise ValueError(f"DenseVector needs a 1D buffer, got shape {data.shape}")
        self._data = data
        self._n = data.shape[0]

    @classmethod
    def from_array(cls, array: NDArray[Any], copy: bool = True) -> DenseVector:
        """Wrap `array`; with copy=False a float64 contiguous input is used in place."""
        return cls(_as_buffer(array, copy))

    @classmethod
    def zeros(cls, n: int) -> DenseVector:
        return cls(np.zeros(n, dtype=np.float64))

    @property
    def n(self) -> int:
        return self._n

    @property
    def values(self) -> NDArray[np.float64]:
        """Writable view of the underlying buffer."""
        return self._data

    def __getitem__(self, i: int) -> float:
        return float(self._data[i])

    def __setitem__(self, i: int, value: float) -> None:
        self._data[i] = value

    def __len__(self) -> int:
        return self._n

    def swap(self, a: int, b: int) -> None:
        """Exchange elements a and b."""
        if a != b:
            self._data[a], self._data[b] = self._data[b], self._data[a]

    def to_array(self) -> NDArray[np.float64]:
        return self._data.copy()

    def __repr__(self) -> str:
        return f"DenseVector(n={self._n})"
