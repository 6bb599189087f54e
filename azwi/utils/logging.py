"""azwi 로그 포매터와 로깅 설정.

phase는 ``extra=``로 phase, object_id, subject 필드를 넘긴다.
LOG_FORMAT=json이면 이 필드들이 항상 최상위 키로 출력되고,
text이면 ``key=value`` 쌍으로 메시지 뒤에 붙는다.
"""
import json
import logging
from datetime import UTC, datetime
from typing import Any, Optional

from azwi.config import settings

# phase 로그에 항상 포함되는 구조화 필드
STRUCTURED_FIELDS = ("phase", "object_id", "subject")

_RECORD_ATTRIBUTES = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime"}

_PACKAGE_LOGGER = "azwi"
_NOISY_LOGGERS = (
    "azure.core.pipeline.policies.http_logging_policy",
    "azure.identity",
    "httpx",
)


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    """레코드에서 ``extra=``로 추가된 필드만 추린다."""
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RECORD_ATTRIBUTES and not key.startswith("_")
    }


class JsonFormatter(logging.Formatter):
    """로그 레코드를 한 줄 JSON으로 출력한다.

    구조화 필드는 값이 없으면 null로 출력한다.
    그 외 extra 필드는 ``fields`` 아래에 둔다.
    """

    def format(self, record: logging.LogRecord) -> str:
        extra = _extra_fields(record)
        entry: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key in STRUCTURED_FIELDS:
            entry[key] = extra.pop(key, None)
        if extra:
            entry["fields"] = extra
        if record.exc_info and record.exc_info[0] is not None:
            entry["error"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, default=str)


class KeyValueFormatter(logging.Formatter):
    """``level=info msg="..." object_id=...`` 형식의 텍스트 포매터."""

    def format(self, record: logging.LogRecord) -> str:
        pairs = [
            ("time", datetime.fromtimestamp(record.created, UTC).isoformat()),
            ("level", record.levelname.lower()),
            ("msg", record.getMessage()),
        ]
        pairs.extend(sorted(_extra_fields(record).items()))
        line = " ".join(f"{key}={self._quote(value)}" for key, value in pairs)
        if record.exc_info and record.exc_info[0] is not None:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line

    @staticmethod
    def _quote(value: Any) -> str:
        text = str(value)
        if not text or any(c in text for c in ' ="'):
            return json.dumps(text, ensure_ascii=False)
        return text


def configure_logging(
    log_format: Optional[str] = None, log_level: Optional[str] = None
) -> logging.Logger:
    """azwi 패키지 로거에 stderr 핸들러를 설정한다.

    Args:
        log_format: "json" 또는 "text" (미지정 시 LOG_FORMAT).
        log_level: 로그 레벨 (미지정 시 LOG_LEVEL).

    Returns:
        설정된 ``azwi`` 로거.
    """
    log_format = (log_format or settings.log_format).lower()
    log_level = log_level or settings.log_level

    logger = logging.getLogger(_PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # 반복 호출 시 핸들러가 중복되지 않도록 교체한다.
    logger.handlers.clear()
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter() if log_format == "json" else KeyValueFormatter())
    logger.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return logger
