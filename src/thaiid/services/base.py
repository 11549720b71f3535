"""BaseService — shared foundation for thaiid services.

Every service receives the resolved :class:`ThaiIdSettings` at
construction time and reads its defaults (batch size, seed stride,
fixture fields) from there rather than from module globals.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from thaiid.config.settings import ThaiIdSettings


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class IdentityService(BaseService):
            def generate(self, count: int | None = None) -> ServiceResult:
                count = count or self._settings.generator.count
                ...
    """

    def __init__(self, settings: ThaiIdSettings) -> None:
        self._settings = settings
        self._log = structlog.get_logger(type(self).__module__)

    @staticmethod
    def seed_from_clock() -> int:
        """Current Unix time in milliseconds, for clock-seeded fixtures."""
        return time.time_ns() // 1_000_000
