"""Process-level configuration: logging and random seeding."""
from __future__ import annotations

import logging
from typing import Optional

from permops import rng


LOGGER = logging.getLogger("permops")


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure the package logger once and return it."""
    LOGGER.setLevel(level)
    if LOGGER.handlers:
        return LOGGER
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)s %(name)s: %(message)s", "%H:%M:%S"
    )
    handler.setFormatter(formatter)
    LOGGER.addHandler(handler)
    return LOGGER


def configure_random_generator(seed: Optional[int] = None) -> None:
    """Seed the generator factory so every operator built afterwards is reproducible."""
    if seed is None:
        rng.configure_default()
    else:
        rng.configure(seed)
