"""The dense row-major Tensor type."""

from __future__ import annotations
import logging
import numbers
from typing import Any, Iterable, List, Sequence, Tuple, Union

import numpy as np

from .config import get_printoptions
from .core.storage import (
    Storage,
    check_shape,
    compute_offsets,
    flat_position,
    numel,
)
from .errors import OutOfBoundsError, WrongShapeError

logger = logging.getLogger(__name__)


class Tensor:
    """
    A dense multi-dimensional float32 array in row-major layout.

    Owns a flat read-only buffer, a shape and the offsets (strides)
    derived from it. Tensors are immutable: indexing copies the selected
    block into a new Tensor instead of aliasing the parent's buffer.

    Example:
        >>> t = Tensor(range(12), (2, 2, 3))
        >>> t.offsets
        (6, 3, 1)
        >>> t.at([1]).tolist()
        [[6.0, 7.0, 8.0], [9.0, 10.0, 11.0]]
    """

    def __init__(self, data: Any, shape: Iterable[int]):
        """
        Create a Tensor from a flat buffer and a shape.

        Args:
            data: Flat sequence or iterable of numbers, numpy array
                (flattened) or Storage. Anything but a Storage is copied;
                a Storage is adopted without copying, which is safe because
                its buffer is read-only.
            shape: Dimension sizes

        Raises:
            TypeError: If ``data`` is a ``str`` or ``bytes``
            WrongShapeError: If the product of ``shape`` differs from the
                number of elements in ``data``
        """
        shape = check_shape(shape)
        storage = data if isinstance(data, Storage) else Storage(data)
        expected = numel(shape)
        if expected != len(storage):
            raise WrongShapeError(
                f"Shape {shape} needs {expected} elements, got {len(storage)}"
            )
        self._storage = storage
        self._shape = shape
        self._offsets = compute_offsets(shape)
        logger.debug("Created tensor with shape=%s offsets=%s", self._shape, self._offsets)

    @classmethod
    def new(cls, data: Any, shape: Iterable[int]) -> 'Tensor':
        """Validated construction; same as calling ``Tensor(data, shape)``."""
        return cls(data, shape)

    @classmethod
    def zeros(cls, shape: Iterable[int]) -> 'Tensor':
        """
        Create a Tensor of the given shape filled with ``0.0``.

        Raises:
            WrongShapeError: If ``shape`` is invalid or describes more
                elements than a buffer can hold
        """
        shape = check_shape(shape)
        return cls(Storage.zeros(numel(shape)), shape)

    @property
    def data(self) -> np.ndarray:
        """Flat read-only float32 buffer."""
        return self._storage.numpy()

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._shape

    @property
    def offsets(self) -> Tuple[int, ...]:
        """Row-major offset of each dimension."""
        return self._offsets

    strides = offsets

    @property
    def ndim(self) -> int:
        return len(self._shape)

    @property
    def numel(self) -> int:
        return len(self._storage)

    def __len__(self) -> int:
        if not self._shape:
            raise TypeError("len() of a 0-d tensor")
        return self._shape[0]

    def _check_index(self, index: Sequence[int]) -> Tuple[int, ...]:
        if isinstance(index, (str, bytes)) or not isinstance(index, Iterable):
            raise TypeError(f"Index must be a sequence of integers, got {index!r}")
        idx = tuple(index)
        for i in idx:
            if isinstance(i, (bool, np.bool_)) or not isinstance(i, numbers.Integral):
                raise TypeError(f"Index components must be integers, got {i!r}")
        if len(idx) > self.ndim:
            raise WrongShapeError(
                f"Index {idx} has {len(idx)} components but tensor has rank {self.ndim}"
            )
        for dim, (i, size) in enumerate(zip(idx, self._shape)):
            if i < 0 or i >= size:
                raise OutOfBoundsError(
                    f"Index {i} out of bounds for dimension {dim} with size {size}"
                )
        return tuple(int(i) for i in idx)

    def at(self, index: Sequence[int]) -> 'Tensor':
        """
        Extract the sub-tensor selected by a partial or full multi-index.

        Each component fixes one leading dimension. The result holds the
        remaining trailing dimensions; a full index gives shape ``(1,)``.
        An empty index selects the whole tensor and returns a copy.

        Args:
            index: One integer per leading dimension to fix

        Returns:
            A new Tensor owning a copy of the selected block

        Raises:
            WrongShapeError: If ``index`` is longer than the tensor's rank
            OutOfBoundsError: If a component is negative or not smaller
                than its dimension's size
            TypeError: If a component is not an integer
        """
        idx = self._check_index(index)
        if not idx:
            return Tensor(self._storage.clone(), self._shape)

        start = flat_position(idx, self._offsets)
        end = start + self._offsets[len(idx) - 1]
        new_shape = self._shape[len(idx):] or (1,)
        logger.debug("Indexing %s with %s -> [%d, %d)", self._shape, idx, start, end)
        return Tensor(self._storage.slice(start, end), new_shape)

    def __getitem__(self, index: Union[int, Tuple[int, ...]]) -> 'Tensor':
        if isinstance(index, tuple):
            return self.at(index)
        if isinstance(index, numbers.Integral) and not isinstance(index, (bool, np.bool_)):
            return self.at((index,))
        raise TypeError(f"Tensor indices must be integers or tuples of integers, got {index!r}")

    def item(self) -> float:
        """Value of a single-element tensor."""
        if self.numel != 1:
            raise WrongShapeError(
                f"Only single-element tensors convert to a scalar, shape is {self._shape}"
            )
        return self._storage[0]

    def numpy(self) -> np.ndarray:
        """Writable copy of the data reshaped to ``shape``."""
        return self.data.reshape(self._shape).copy()

    def tolist(self) -> Union[List[Any], float]:
        return self.numpy().tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tensor):
            return NotImplemented
        return (
            self._shape == other._shape
            and self._offsets == other._offsets
            and self._storage == other._storage
        )

    __hash__ = None

    def __repr__(self) -> str:
        opts = get_printoptions()
        data_str = np.array2string(
            self.numpy(),
            precision=opts.precision,
            suppress_small=opts.suppress_small,
            threshold=opts.threshold,
            max_line_width=opts.linewidth,
            separator=", ",
            prefix="tensor(",
        )
        return f"tensor({data_str}, shape={self._shape})"


def tensor(data: Any, shape: Iterable[int]) -> Tensor:
    """Create a Tensor from a flat buffer and a shape."""
    return Tensor(data, shape)


def zeros(*shape: Any) -> Tensor:
    """
    Create a zero-filled Tensor.

    Accepts either a single shape sequence or the sizes as arguments:
    ``zeros((2, 3))`` and ``zeros(2, 3)`` are equivalent.
    """
    if len(shape) == 1 and isinstance(shape[0], Iterable):
        shape = shape[0]
    return Tensor.zeros(shape)
