"""BaseService — shared foundation for dumpjson services.

Every service receives the resolved :class:`DumpJsonSettings` at
construction time and converts typed failures into ServiceResult errors
through :meth:`BaseService._failure`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dumpjson.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from dumpjson.config.settings import DumpJsonSettings
    from dumpjson.domain.errors import DumpJsonError

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class JsonAddon(BaseService):
            def parse(self, text: str) -> ServiceResult:
                try:
                    ...
                except DumpJsonError as exc:
                    return self._failure("parse", exc)
    """

    def __init__(self, settings: DumpJsonSettings) -> None:
        self._settings = settings

    @staticmethod
    def _failure(op: str, exc: DumpJsonError) -> ServiceResult:
        """Build a failed ServiceResult from a typed error."""
        logger.debug("%s failed with %s", op, exc.code, exc_info=True)
        detail = {key: value for key, value in exc.detail.items() if value is not None}
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=str(exc), detail=detail),
        )
