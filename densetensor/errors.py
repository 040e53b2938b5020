"""Exception types raised by densetensor."""


class TensorError(Exception):
    """Base class for all tensor construction and indexing failures."""


class WrongShapeError(TensorError, ValueError):
    """
    Shape does not match the data, or an index has too many components.
    
    Raised when the product of a shape differs from the number of supplied
    elements, when a shape holds an invalid dimension size, or when a
    multi-index is longer than the tensor's rank.
    """


class OutOfBoundsError(TensorError, IndexError):
    """An index component falls outside the size of its dimension."""
