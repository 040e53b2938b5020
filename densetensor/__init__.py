"""
DenseTensor: Dense Row-Major Tensors
====================================

A small, immutable multi-dimensional float32 array. Every tensor owns a
flat buffer, a shape and the row-major offsets derived from it; indexing
by a partial or full multi-index copies out a smaller tensor.

Example:
    >>> import densetensor as dn
    >>> t = dn.tensor(range(12), (2, 2, 3))
    >>> t.at([1, 1, 0]).item()
    9.0
    >>> t[1].shape
    (2, 3)
"""

__version__ = "0.1.0"

import logging

from .tensor import Tensor, tensor, zeros
from .errors import TensorError, WrongShapeError, OutOfBoundsError
from .config import PrintOptions, get_printoptions, set_printoptions, printoptions
from ._logging import setup_logging

# Low-level core (for advanced users)
from .core import Storage, compute_offsets

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Tensor',
    'tensor',
    'zeros',
    'TensorError',
    'WrongShapeError',
    'OutOfBoundsError',
    'PrintOptions',
    'get_printoptions',
    'set_printoptions',
    'printoptions',
    'setup_logging',
    'Storage',
    'compute_offsets',
]
