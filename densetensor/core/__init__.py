"""Core storage and layout infrastructure for DenseTensor."""

from .storage import (
    MAX_NUMEL,
    Storage,
    check_shape,
    compute_offsets,
    flat_position,
    numel,
)

__all__ = [
    'MAX_NUMEL',
    'Storage',
    'check_shape',
    'compute_offsets',
    'flat_position',
    'numel',
]
