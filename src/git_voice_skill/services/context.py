"""Host completion for one skill invocation."""

import logging
from typing import Any

from ..models.skill import SkillResult

logger = logging.getLogger(__name__)


class SkillContext:
    """Records the single success or failure completion of an invocation.

    The host rejects duplicate completions, so only the first call to
    ``succeed`` or ``fail`` counts; later calls are logged and dropped.
    """

    def __init__(self) -> None:
        self._result: SkillResult | None = None

    @property
    def completed(self) -> bool:
        return self._result is not None

    @property
    def result(self) -> SkillResult | None:
        return self._result

    def succeed(self, payload: dict[str, Any] | None = None) -> bool:
        """Complete the invocation with a response payload (None for no body)."""
        if self._result is not None:
            logger.warning("Ignoring succeed() on an already completed invocation")
            return False
        self._result = SkillResult(success=True, payload=payload)
        return True

    def fail(self, message: str, error_type: str | None = None) -> bool:
        """Complete the invocation with a failure message."""
        if self._result is not None:
            logger.warning(f"Ignoring fail() on an already completed invocation: {message}")
            return False
        self._result = SkillResult(success=False, error=message, error_type=error_type)
        return True
