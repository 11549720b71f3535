"""thaiid — Thai national ID checksums and fixture generation."""

from thaiid.domain.ids import (
    InvalidInputError,
    checksum,
    generate_from_seed,
    generate_random,
    is_valid,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidInputError",
    "__version__",
    "checksum",
    "generate_from_seed",
    "generate_random",
    "is_valid",
]
