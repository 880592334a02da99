from permops.config import configure_logging, configure_random_generator
from permops.exceptions import IllegalStateError
from permops.permutation import Permutation
from permops.rng import SplittableGenerator

__version__ = "0.1.0"

__all__ = [
    "Permutation",
    "SplittableGenerator",
    "IllegalStateError",
    "configure_logging",
    "configure_random_generator",
]
