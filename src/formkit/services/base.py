"""BaseService — shared foundation for formkit services.

Every service receives the resolved :class:`FormkitSettings` at
construction time and reads its configured defaults from there.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from formkit.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from formkit.config.settings import FormkitSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class TimeService(BaseService):
            def ago(self, target: str) -> ServiceResult:
                ...
    """

    def __init__(self, settings: FormkitSettings) -> None:
        self._settings = settings

    @staticmethod
    def _fail(op: str, code: ErrorCode, message: str, **detail: object) -> ServiceResult:
        """Build a failed result and log it at debug level."""
        logger.debug("%s failed: %s (%s)", op, message, code)
        return ServiceResult.failure(op, code, message, **detail)
