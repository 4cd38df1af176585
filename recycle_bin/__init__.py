"""
사이트 휴지통 패키지

사이트 모음/사이트 삭제 직전에 백업을 수행하고, 백업에 실패하면 삭제를 취소합니다.
"""

from .audit import AuditSink
from .event_log import SystemEventLog
from .executor import BackupExecutor
from .interceptor import DeleteEventReceiver
from .lifecycle import HookLifecycleManager
from .naming import BackupPathResolver

__all__ = [
    "AuditSink",
    "SystemEventLog",
    "BackupExecutor",
    "DeleteEventReceiver",
    "HookLifecycleManager",
    "BackupPathResolver",
]
