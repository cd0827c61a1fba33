import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional


class StructuredRepositoryLogger:
    """
    JSON-lines logger for repository operations.
    Fields bound at construction (or via bind) are merged into every event;
    per-event fields win on conflict.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        level: int = logging.INFO,
        **context: Any,
    ):
        self._logger = logger or logging.getLogger("repository")
        self._level = level
        self._context: Dict[str, Any] = dict(context)

    def bind(self, **fields: Any) -> "StructuredRepositoryLogger":
        return StructuredRepositoryLogger(self._logger, self._level, **{**self._context, **fields})

    def emit(self, event_type: str, **fields: Any) -> None:
        if not self._logger.isEnabledFor(self._level):
            return
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "event_type": event_type,
        }
        payload.update(self._context)
        payload.update(fields)
        self._logger.log(self._level, json.dumps(payload, default=str, ensure_ascii=True))


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
