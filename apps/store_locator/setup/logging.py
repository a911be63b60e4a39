"""Logging configuration.

엔진 로그는 extra={...}로 session_id, store_id 같은 문맥을 남깁니다.
포매터는 그 문맥을 text 한 줄 뒤에 key=value로, 또는 JSON 필드로 출력합니다.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

ENGINE_LOGGER = "store_locator"
TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# LogRecord 기본 속성 (extra 문맥 추출 시 제외)
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime", "taskName"}

_SENSITIVE_KEYS = ("key", "token", "secret")


def extra_context(record: logging.LogRecord) -> dict[str, Any]:
    """레코드에 extra로 붙은 문맥 필드. API 키류는 가립니다."""
    context: dict[str, Any] = {}
    for key, value in record.__dict__.items():
        if key in _RECORD_ATTRS:
            continue
        if any(s in key.lower() for s in _SENSITIVE_KEYS):
            value = "***"
        context[key] = value
    return context


class ContextTextFormatter(logging.Formatter):
    """기본 text 포맷 뒤에 extra 문맥을 key=value로 덧붙입니다."""

    def __init__(self) -> None:
        super().__init__(TEXT_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = extra_context(record)
        if not context:
            return line
        pairs = " ".join(f"{k}={v}" for k, v in context.items())
        return f"{line} | {pairs}"


class ContextJsonFormatter(logging.Formatter):
    """한 줄 JSON 포매터."""

    def __init__(self, service_name: str = "store-locator") -> None:
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "@timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "message": record.getMessage(),
            "log.level": record.levelname.lower(),
            "log.logger": record.name,
            "service.name": self.service_name,
        }
        if record.exc_info:
            log_obj["error.type"] = record.exc_info[0].__name__ if record.exc_info[0] else None
            log_obj["error.stack_trace"] = self.formatException(record.exc_info)

        context = extra_context(record)
        if context:
            log_obj["labels"] = context
        return json.dumps(log_obj, ensure_ascii=False, default=str)


def setup_logging(
    level: str = "INFO",
    *,
    engine_level: str | None = None,
    json_format: bool = False,
    service_name: str = "store-locator",
) -> None:
    """애플리케이션 로깅을 설정합니다.

    Args:
        level: 루트 로그 레벨
        engine_level: store_locator 패키지 로그 레벨 (없으면 level)
        json_format: JSON 한 줄 포맷 사용 여부
        service_name: JSON 로그의 service.name
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        ContextJsonFormatter(service_name) if json_format else ContextTextFormatter()
    )
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=[handler],
    )

    engine = logging.getLogger(ENGINE_LOGGER)
    engine.setLevel(getattr(logging, (engine_level or level).upper(), logging.INFO))

    # HTTP 클라이언트 로깅 레벨 조정
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
