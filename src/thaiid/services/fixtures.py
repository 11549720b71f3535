"""FixtureService — customer payloads for API test suites."""

from __future__ import annotations

import random
from typing import Any

from thaiid.domain.ids import generate_from_seed, generate_random
from thaiid.services.base import BaseService
from thaiid.services.identity import check_batch_args, duplicate_warnings
from thaiid.services.result import ServiceResult


class FixtureService(BaseService):
    """Build request payloads whose ``idcard`` field is a valid Thai ID.

    Non-ID fields come from the ``[fixture]`` config section.
    """

    def customer(self, idcard: str) -> dict[str, Any]:
        """A single customer payload around an existing *idcard*."""
        defaults = self._settings.fixture
        return {
            "idcard": idcard,
            "firstname": defaults.firstname,
            "lastname": defaults.lastname,
            "phone": defaults.phone,
            "address": defaults.address,
        }

    def customers(
        self,
        count: int = 1,
        *,
        seed: int | None = None,
        rng: random.Random | None = None,
    ) -> ServiceResult:
        """Build *count* customer payloads, seeded ``seed + i`` when given."""
        op = "customer_fixtures"
        invalid = check_batch_args(op, count, seed, 1)
        if invalid is not None:
            return invalid

        if seed is None:
            ids = [generate_random(rng) for _ in range(count)]
        else:
            ids = [generate_from_seed(seed + i) for i in range(count)]

        items = [self.customer(idcard) for idcard in ids]
        self._log.debug("customer_fixtures_built", count=count, seed=seed)
        return ServiceResult(
            ok=True,
            op=op,
            data={"count": count, "items": items},
            warnings=duplicate_warnings(ids),
        )
