"""Logging Configuration.

stdout으로 ECS JSON 로그를 출력합니다. 모든 레코드에 service 메타데이터를 붙입니다.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable

import ecs_logging

from disposal.setup.config import Settings, get_settings

# 요청 URL에 API key가 query string으로 포함되는 라이브러리
QUIET_LOGGERS = ("httpx", "httpcore")

_base_record_factory: Callable[..., logging.LogRecord] | None = None


def _service_metadata(settings: Settings) -> dict[str, str]:
    return {
        "name": settings.service_name,
        "version": settings.service_version,
        "environment": settings.environment,
    }


def _install_record_factory(service: dict[str, str]) -> None:
    """service 메타데이터를 붙이는 레코드 팩토리를 설치합니다.

    최초 호출 시의 팩토리만 감싸므로 여러 번 호출해도 중첩되지 않습니다.
    """
    global _base_record_factory  # noqa: PLW0603
    if _base_record_factory is None:
        _base_record_factory = logging.getLogRecordFactory()
    base_factory = _base_record_factory

    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = base_factory(*args, **kwargs)
        record.service = dict(service)
        return record

    logging.setLogRecordFactory(record_factory)


def setup_logging() -> None:
    """로깅 설정."""
    settings = get_settings()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ecs_logging.StdlibFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level.upper())
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    _install_record_factory(_service_metadata(settings))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
