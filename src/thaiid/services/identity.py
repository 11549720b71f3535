"""IdentityService — batch generation, validation, and checksum lookup.

Seeded batches follow the fixture convention of deriving each ID from
``seed + offset``: item *i* uses seed ``seed + i * stride``. Random
batches draw each body independently. Duplicates inside a batch are
reported as warnings, since seeds can alias modulo SEED_MODULUS.
"""

from __future__ import annotations

import random
from collections import Counter
from collections.abc import Iterable
from typing import Any

from thaiid.domain.ids import (
    InvalidInputError,
    checksum,
    classify,
    generate_from_seed,
    generate_random,
    normalize_id,
    split_id,
)
from thaiid.domain.types import GenerationMode, IdStatus
from thaiid.services.base import BaseService
from thaiid.services.result import ServiceResult


def _describe(id_card: str, seed: int | None) -> dict[str, Any]:
    body, check_digit = split_id(id_card)
    return {"id": id_card, "body": body, "check_digit": check_digit, "seed": seed}


def check_batch_args(
    op: str, count: int, seed: int | None, stride: int
) -> ServiceResult | None:
    """Return a failure result for out-of-range batch arguments, else None."""
    if count < 1:
        return ServiceResult.failure(
            op, "INVALID_COUNT", f"Count must be at least 1, got {count}", count=count
        )
    if seed is not None and seed < 0:
        return ServiceResult.failure(
            op, "INVALID_SEED", f"Seed must be non-negative, got {seed}", seed=seed
        )
    if stride < 1:
        return ServiceResult.failure(
            op, "INVALID_STRIDE", f"Stride must be at least 1, got {stride}", stride=stride
        )
    return None


def duplicate_warnings(ids: Iterable[str]) -> list[str]:
    """One warning per ID that occurs more than once."""
    return [
        f"Duplicate ID {id_card} generated {n} times"
        for id_card, n in Counter(ids).items()
        if n > 1
    ]


class IdentityService(BaseService):
    """Generate and check Thai ID numbers."""

    def generate(
        self,
        count: int | None = None,
        *,
        seed: int | None = None,
        stride: int | None = None,
        rng: random.Random | None = None,
    ) -> ServiceResult:
        """Generate *count* valid IDs, seeded when *seed* is given."""
        op = "generate"
        count = self._settings.generator.count if count is None else count
        stride = self._settings.generator.stride if stride is None else stride
        invalid = check_batch_args(op, count, seed, stride)
        if invalid is not None:
            return invalid

        if seed is None:
            mode = GenerationMode.RANDOM
            items = [_describe(generate_random(rng), None) for _ in range(count)]
        else:
            mode = GenerationMode.SEEDED
            items = []
            for i in range(count):
                item_seed = seed + i * stride
                items.append(_describe(generate_from_seed(item_seed), item_seed))

        warnings = duplicate_warnings(item["id"] for item in items)
        self._log.debug("ids_generated", count=count, mode=str(mode), seed=seed)
        return ServiceResult(
            ok=True,
            op=op,
            data={"count": count, "mode": str(mode), "items": items},
            warnings=warnings,
        )

    def validate(self, candidates: Iterable[str], *, lenient: bool = False) -> ServiceResult:
        """Classify each candidate; fail with INVALID_ID if any is not valid.

        With *lenient*, whitespace and ``-`` separators are stripped first
        so printed IDs like ``1-1017-00203-45-1`` can be checked.
        """
        op = "validate"
        items: list[dict[str, Any]] = []
        for raw in candidates:
            candidate = normalize_id(raw) if lenient else raw
            status = classify(candidate)
            items.append(
                {"id": raw, "status": str(status), "valid": status is IdStatus.VALID}
            )

        if not items:
            return ServiceResult.failure(op, "NO_INPUT", "No candidates to validate")

        invalid = [item for item in items if not item["valid"]]
        data = {
            "count": len(items),
            "valid_count": len(items) - len(invalid),
            "invalid_count": len(invalid),
            "items": items,
        }
        self._log.debug("ids_validated", count=len(items), invalid=len(invalid))
        if invalid:
            return ServiceResult.failure(
                op,
                "INVALID_ID",
                f"{len(invalid)} of {len(items)} candidates invalid: "
                + ", ".join(repr(item["id"]) for item in invalid),
                data=data,
                invalid={item["id"]: item["status"] for item in invalid},
            )
        return ServiceResult(ok=True, op=op, data=data)

    def checksum(self, body: str) -> ServiceResult:
        """Compute the check digit for a 12-digit body."""
        op = "checksum"
        try:
            check_digit = checksum(body)
        except InvalidInputError as exc:
            return ServiceResult.failure(op, "INVALID_INPUT", str(exc), body=body)
        return ServiceResult(
            ok=True,
            op=op,
            data={"body": body, "check_digit": check_digit, "id": f"{body}{check_digit}"},
        )
