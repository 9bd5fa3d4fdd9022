"""BaseService — shared plumbing for commonkit services."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from commonkit.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from commonkit.config.settings import CommonKitSettings
    from commonkit.errors import CommonKitError

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service classes.

    Subclasses wrap the stateless helpers and turn their exceptions into
    failed :class:`ServiceResult` values::

        class DateService(BaseService):
            def parse(self, text: str) -> ServiceResult:
                try:
                    ...
                except CommonKitError as exc:
                    return self._failure("parse_date", exc)
    """

    def __init__(self, settings: CommonKitSettings | None = None) -> None:
        self._settings = settings

    @staticmethod
    def _failure(
        op: str,
        exc: CommonKitError,
        *,
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        logger.debug("%s failed: %s", op, exc)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code=exc.code,
                message=exc.message,
                hint=exc.hint,
                detail=detail or {},
            ),
        )
