"""
시스템 이벤트 로그

실패 경로에서만 기록되는 보조 로그입니다. 고정된 소스 이름의 로거로
기록하며, 설정에 따라 Windows 이벤트 로그 핸들러를 연결합니다.
"""

import logging
import logging.handlers
import threading
from typing import Optional, Set

from config.constants import EventLogSeverity
from config.settings import RecycleBinConfig, get_recycle_bin_config

_SEVERITY_LEVELS = {
    EventLogSeverity.ERROR: logging.ERROR,
    EventLogSeverity.WARNING: logging.WARNING,
    EventLogSeverity.INFORMATION: logging.INFO,
}


class _EventIdLogHandler(logging.handlers.NTEventLogHandler):
    """레코드의 event_id 를 Windows 이벤트 ID 로 사용"""

    def getEventID(self, record):
        return getattr(record, "event_id", 1)


class SystemEventLog:
    """이벤트 소스별 시스템 로그"""

    _source_lock = threading.Lock()
    _created_sources: Set[str] = set()

    def __init__(self, settings: Optional[RecycleBinConfig] = None):
        self.settings = settings or get_recycle_bin_config()
        self.source = self.settings.event_source
        self.logger = logging.getLogger(f"eventlog.{self.source}")

    def source_exists(self) -> bool:
        return self.source in self._created_sources

    def ensure_source(self) -> None:
        """이벤트 소스가 없으면 생성"""
        with self._source_lock:
            if self.source_exists():
                return
            if self.settings.use_nt_event_log:
                handler = _EventIdLogHandler(
                    self.source, logtype=self.settings.event_log_name
                )
                handler.setLevel(logging.ERROR)
                self.logger.addHandler(handler)
            self._created_sources.add(self.source)
            self.logger.debug(
                f"이벤트 소스 생성: {self.source} ({self.settings.event_log_name})"
            )

    def write_entry(
        self,
        message: str,
        severity: EventLogSeverity = EventLogSeverity.ERROR,
        event_id: Optional[int] = None,
    ) -> None:
        """이벤트 로그 기록"""
        self.ensure_source()
        self.logger.log(
            _SEVERITY_LEVELS[severity],
            message,
            extra={
                "event_id": event_id if event_id is not None else self.settings.event_id,
                "event_source": self.source,
            },
        )
