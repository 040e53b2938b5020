"""Print options controlling how tensors are rendered by ``repr``."""

from __future__ import annotations
import contextlib
import dataclasses
import logging
import os
import tomllib
from dataclasses import dataclass
from typing import Any, Dict, Iterator

logger = logging.getLogger(__name__)


@dataclass
class PrintOptions:
    """Formatting passed through to ``numpy.array2string``."""

    precision: int = 4
    suppress_small: bool = True
    threshold: int = 1000
    linewidth: int = 75

    def __post_init__(self):
        for name in ("precision", "threshold", "linewidth"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
        if not isinstance(self.suppress_small, bool):
            raise ValueError(f"suppress_small must be a bool, got {self.suppress_small!r}")

    @classmethod
    def load(cls, config_path: str) -> "PrintOptions":
        """
        Load print options from a TOML file.

        Args:
            config_path: Path to a TOML file containing a "print" table

        Returns:
            PrintOptions populated from the "print" table; missing keys
            keep their defaults

        Raises:
            FileNotFoundError: If no file exists at ``config_path``
        """
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found at {config_path}")

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        return cls(**data.get("print", {}))

    def as_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


_options = PrintOptions()


def get_printoptions() -> PrintOptions:
    """Return the print options currently in effect."""
    return _options


def set_printoptions(**kwargs: Any) -> PrintOptions:
    """
    Update the global print options.

    Unknown option names raise ``TypeError``; invalid values raise
    ``ValueError`` and leave the current options unchanged.
    """
    global _options
    _options = dataclasses.replace(_options, **kwargs)
    logger.debug("Print options set to %s", _options)
    return _options


@contextlib.contextmanager
def printoptions(**kwargs: Any) -> Iterator[PrintOptions]:
    """
    Context manager that temporarily overrides print options.

    Example:
        >>> with printoptions(precision=2):
        ...     print(t)
    """
    global _options
    prev = _options
    try:
        yield set_printoptions(**kwargs)
    finally:
        _options = prev
