"""Thai national ID numbers: checksum, validation, and generation.

A Thai ID card number is 13 decimal digits. The first 12 are the body;
the 13th is a check digit derived from the body with a weighted sum
modulo 11.

INVARIANT: every ID produced here is 13 ASCII digits and passes is_valid().
"""

from __future__ import annotations

import random
import re

from thaiid.domain.types import IdStatus

ID_LENGTH = 13
BODY_LENGTH = 12
WEIGHTS: tuple[int, ...] = tuple(range(13, 1, -1))

# Generated bodies never start with 0.
BODY_MIN = 100_000_000_000
BODY_MAX = 999_999_999_999
SEED_MODULUS = 900_000_000_000

# [0-9] rather than \d: str patterns treat any Unicode digit as \d.
ID_PATTERN: re.Pattern[str] = re.compile(r"[0-9]{13}")
BODY_PATTERN: re.Pattern[str] = re.compile(r"[0-9]{12}")

_SEPARATORS = re.compile(r"[\s-]")


class InvalidInputError(ValueError):
    """Raised when a body or ID is not made of the expected ASCII digits."""


def checksum(body: str) -> int:
    """Compute the check digit for a 12-digit *body*.

    Raises:
        InvalidInputError: If *body* is not exactly 12 ASCII digits.
    """
    if not isinstance(body, str) or BODY_PATTERN.fullmatch(body) is None:
        msg = f"Expected 12 ASCII digits, got {body!r}"
        raise InvalidInputError(msg)
    total = sum(int(digit) * weight for digit, weight in zip(body, WEIGHTS))
    return (11 - total % 11) % 10


def _with_check_digit(body_value: int) -> str:
    body = f"{body_value:012d}"
    return f"{body}{checksum(body)}"


def generate_random(rng: random.Random | None = None) -> str:
    """Generate a random valid ID.

    The body is drawn uniformly from ``[BODY_MIN, BODY_MAX]``. Pass *rng*
    to control the randomness source; the module-level generator is used
    otherwise.
    """
    source = rng if rng is not None else random
    return _with_check_digit(source.randint(BODY_MIN, BODY_MAX))


def generate_from_seed(seed: int) -> str:
    """Derive a valid ID deterministically from *seed*.

    ``body = seed % SEED_MODULUS + BODY_MIN``. The same seed always maps
    to the same ID; distinct seeds may alias to the same body.
    """
    return _with_check_digit(seed % SEED_MODULUS + BODY_MIN)


def classify(candidate: object) -> IdStatus:
    """Classify *candidate* as valid, malformed, or a checksum mismatch."""
    if not isinstance(candidate, str) or ID_PATTERN.fullmatch(candidate) is None:
        return IdStatus.MALFORMED
    if checksum(candidate[:BODY_LENGTH]) != int(candidate[BODY_LENGTH]):
        return IdStatus.CHECKSUM_MISMATCH
    return IdStatus.VALID


def is_valid(candidate: object) -> bool:
    """Return True if *candidate* is a 13-digit ID with a correct check digit.

    Never raises: malformed input of any type is simply invalid.
    """
    return classify(candidate) is IdStatus.VALID


def split_id(id_card: str) -> tuple[str, int]:
    """Split a well-formed ID into ``(body, check_digit)``.

    The check digit is not verified here; use is_valid() for that.
    """
    if not isinstance(id_card, str) or ID_PATTERN.fullmatch(id_card) is None:
        msg = f"Expected 13 ASCII digits, got {id_card!r}"
        raise InvalidInputError(msg)
    return id_card[:BODY_LENGTH], int(id_card[BODY_LENGTH])


def format_id(id_card: str) -> str:
    """Render an ID in the printed card grouping ``X-XXXX-XXXXX-XX-X``."""
    body, check_digit = split_id(id_card)
    return f"{body[0]}-{body[1:5]}-{body[5:10]}-{body[10:12]}-{check_digit}"


def normalize_id(candidate: str) -> str:
    """Strip whitespace and ``-`` separators from a printed ID."""
    return _SEPARATORS.sub("", candidate)
