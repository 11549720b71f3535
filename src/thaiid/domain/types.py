"""Classification enums for ID validation and generation."""

from __future__ import annotations

from enum import StrEnum


class IdStatus(StrEnum):
    """Outcome of checking a candidate ID string."""

    VALID = "valid"
    MALFORMED = "malformed"
    CHECKSUM_MISMATCH = "checksum_mismatch"


class GenerationMode(StrEnum):
    """How the body of a generated ID was derived."""

    RANDOM = "random"
    SEEDED = "seeded"
