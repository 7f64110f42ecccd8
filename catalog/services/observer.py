"""Structured log sink used by the cancellation pipeline."""

import logging
from typing import Any, Protocol


class Observer(Protocol):
    def info(self, msg: str, **fields: Any) -> None: ...

    def warn(self, msg: str, **fields: Any) -> None: ...

    def error(self, msg: str, exc_info: bool = False, **fields: Any) -> None: ...


class LoggingObserver:
    """Writes ``msg key=value ...`` lines and attaches the fields as ``extra``."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def _log(self, level: int, msg: str, fields: dict[str, Any], exc_info: bool = False) -> None:
        rendered = " ".join([msg, *(f"{key}={value}" for key, value in fields.items())])
        self._logger.log(level, rendered, exc_info=exc_info, extra={"fields": fields})

    def info(self, msg: str, **fields: Any) -> None:
        self._log(logging.INFO, msg, fields)

    def warn(self, msg: str, **fields: Any) -> None:
        self._log(logging.WARNING, msg, fields)

    def error(self, msg: str, exc_info: bool = False, **fields: Any) -> None:
        self._log(logging.ERROR, msg, fields, exc_info=exc_info)
