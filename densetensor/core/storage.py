"""
DenseTensor Core: Storage and Layout
====================================

The foundation layer - the flat float32 buffer and the row-major
index arithmetic every tensor is built on.
"""

from __future__ import annotations
import numbers
from typing import Any, Iterable, Iterator, List, Sequence, Tuple

import numpy as np

from ..errors import WrongShapeError

float32 = np.float32

# Largest element count a flat buffer can address.
MAX_NUMEL = int(np.iinfo(np.intp).max)


class Storage:
    """Read-only flat float32 buffer backing tensor data."""
    
    def __init__(self, data: Any = ()):
        if isinstance(data, (str, bytes)):
            raise TypeError(f"Storage data must be numbers, got {type(data).__name__}")
        if isinstance(data, Iterator):
            arr = np.fromiter(data, dtype=float32)
        else:
            arr = np.array(data, dtype=float32).reshape(-1)
        arr.flags.writeable = False
        self._data = arr
    
    @classmethod
    def zeros(cls, size: int) -> 'Storage':
        storage = cls.__new__(cls)
        arr = np.zeros(size, dtype=float32)
        arr.flags.writeable = False
        storage._data = arr
        return storage
    
    def __len__(self) -> int:
        return self._data.shape[0]
    
    def __getitem__(self, idx: int) -> float:
        return float(self._data[idx])
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Storage):
            return NotImplemented
        return np.array_equal(self._data, other._data, equal_nan=True)
    
    __hash__ = None
    
    def slice(self, start: int, end: int) -> 'Storage':
        """Copy ``[start, end)`` into a new, independently owned Storage."""
        if start < 0 or end < start or end > len(self):
            raise IndexError(
                f"Slice [{start}, {end}) out of range for storage of size {len(self)}"
            )
        return Storage(self._data[start:end])
    
    def clone(self) -> 'Storage':
        return Storage(self._data)
    
    def numpy(self) -> np.ndarray:
        return self._data
    
    def tolist(self) -> List[float]:
        return self._data.tolist()
    
    def __repr__(self) -> str:
        return f"Storage(size={len(self)})"


def check_shape(shape: Iterable[Any]) -> Tuple[int, ...]:
    """
    Normalize a shape to a tuple of non-negative Python ints.
    
    Args:
        shape: Sequence of dimension sizes
    
    Returns:
        The shape as a tuple
    
    Raises:
        WrongShapeError: If a size is negative or not an integer
    """
    if isinstance(shape, (str, bytes)) or not isinstance(shape, Iterable):
        raise WrongShapeError(f"Shape must be a sequence of integers, got {shape!r}")
    dims = []
    for i, d in enumerate(shape):
        if isinstance(d, (bool, np.bool_)) or not isinstance(d, numbers.Integral):
            raise WrongShapeError(f"Dimension {i} has non-integer size {d!r}")
        if d < 0:
            raise WrongShapeError(f"Dimension {i} has negative size {d}")
        dims.append(int(d))
    return tuple(dims)


def numel(shape: Sequence[int]) -> int:
    """
    Number of elements described by ``shape``.
    
    The product is taken over Python ints, so it never wraps; a count
    no buffer could hold is rejected instead.
    
    Raises:
        WrongShapeError: If the product exceeds ``MAX_NUMEL``
    """
    result = 1
    for d in shape:
        result *= d
    if result > MAX_NUMEL:
        raise WrongShapeError(
            f"Shape {tuple(shape)} describes {result} elements, more than the "
            f"maximum buffer size {MAX_NUMEL}"
        )
    return result


def compute_offsets(shape: Sequence[int]) -> Tuple[int, ...]:
    """
    Row-major offsets (strides) for ``shape``.
    
    The last dimension has offset 1 and every other offset is the product
    of the sizes to its right. Rank 0 and rank 1 both give ``(1,)``.
    
    Example:
        >>> compute_offsets((2, 2, 3))
        (6, 3, 1)
    """
    offsets = []
    offset = 1
    for d in reversed(shape[1:]):
        offset *= d
        offsets.append(offset)
    offsets.reverse()
    offsets.append(1)
    return tuple(offsets)


def flat_position(index: Sequence[int], offsets: Sequence[int]) -> int:
    """Flat buffer position where the block selected by ``index`` begins."""
    return sum(i * o for i, o in zip(index, offsets))
