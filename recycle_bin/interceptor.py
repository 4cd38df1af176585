"""
삭제 이벤트 인터셉터

호스트가 사이트 모음/사이트 삭제 직전에 동기적으로 호출합니다.
백업이 끝날 때까지 호출 스레드를 막으며, 백업이 실패하면 삭제를 취소합니다.

상태 전이: IDLE → ENTERING → BACKING_UP → {SUCCEEDED, FAILED}
재시도는 하지 않습니다.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from config.constants import (
    MESSAGES,
    ContainerTier,
    EventLogSeverity,
    InterceptorState,
)
from recycle_bin.audit import AuditSink
from recycle_bin.core.configuration import XmlConfigProvider
from recycle_bin.core.error_handling import RecycleBinError
from recycle_bin.core.models import DeletionOutcome, DeletionProperties
from recycle_bin.core.platform import HostPlatform
from recycle_bin.event_log import SystemEventLog
from recycle_bin.executor import BackupExecutor
from recycle_bin.naming import BackupPathResolver

logger = logging.getLogger(__name__)

_TRANSITIONS = {
    InterceptorState.IDLE: {InterceptorState.ENTERING},
    InterceptorState.ENTERING: {InterceptorState.BACKING_UP},
    InterceptorState.BACKING_UP: {InterceptorState.SUCCEEDED, InterceptorState.FAILED},
    InterceptorState.SUCCEEDED: set(),
    InterceptorState.FAILED: set(),
}

_TIER_MESSAGES = {
    ContainerTier.COLLECTION: (
        MESSAGES["entering_site_delete"],
        MESSAGES["exiting_site_delete"],
        MESSAGES["site_delete_failure"],
    ),
    ContainerTier.CONTAINER: (
        MESSAGES["entering_web_delete"],
        MESSAGES["exiting_web_delete"],
        MESSAGES["web_delete_failure"],
    ),
}


@dataclass
class DeletionPass:
    """삭제 알림 한 건의 처리 상태"""

    tier: ContainerTier
    properties: DeletionProperties
    state: InterceptorState = InterceptorState.IDLE
    history: List[InterceptorState] = field(
        default_factory=lambda: [InterceptorState.IDLE]
    )

    def advance(self, new_state: InterceptorState) -> None:
        if new_state not in _TRANSITIONS[self.state]:
            raise RuntimeError(
                f"잘못된 상태 전이: {self.state.value} → {new_state.value}"
            )
        logger.debug(
            f"{self.properties.full_url}: {self.state.value} → {new_state.value}"
        )
        self.state = new_state
        self.history.append(new_state)


class DeleteEventReceiver:
    """사이트 모음/사이트 삭제 이벤트 수신기"""

    def __init__(
        self,
        platform: HostPlatform,
        config_provider: Optional[XmlConfigProvider] = None,
        audit_sink: Optional[AuditSink] = None,
        event_log: Optional[SystemEventLog] = None,
        executor: Optional[BackupExecutor] = None,
    ):
        self.platform = platform
        self.config_provider = config_provider or XmlConfigProvider()
        self.audit_sink = audit_sink or AuditSink(self.config_provider)
        self.event_log = event_log or SystemEventLog()
        self.executor = executor or BackupExecutor(
            platform, BackupPathResolver(self.config_provider)
        )

    def site_deleting(self, properties: DeletionProperties) -> DeletionOutcome:
        """사이트 모음 삭제 직전 호출"""
        return self._handle(ContainerTier.COLLECTION, properties)

    def web_deleting(self, properties: DeletionProperties) -> DeletionOutcome:
        """사이트 삭제 직전 호출"""
        return self._handle(ContainerTier.CONTAINER, properties)

    def _handle(
        self, tier: ContainerTier, properties: DeletionProperties
    ) -> DeletionOutcome:
        self.event_log.ensure_source()
        entering, exiting, failure = _TIER_MESSAGES[tier]
        deletion = DeletionPass(tier, properties)

        try:
            deletion.advance(InterceptorState.ENTERING)
            self.audit_sink.write(
                entering.format(properties.full_url, properties.user_login_name)
            )

            deletion.advance(InterceptorState.BACKING_UP)
            outcome = self.executor.backup(tier, properties)
        except RecycleBinError as e:
            self._record_abort(properties, failure.format(e.describe()), e)
            raise

        if outcome.is_cancelled:
            deletion.advance(InterceptorState.FAILED)
            detail = outcome.error.describe() if outcome.error else outcome.reason
            self.event_log.write_entry(
                failure.format(detail), severity=EventLogSeverity.ERROR
            )
            self.audit_sink.write(failure.format(detail))
            properties.cancel = True
            properties.error_message = outcome.reason
        else:
            deletion.advance(InterceptorState.SUCCEEDED)
            self.audit_sink.write(
                exiting.format(properties.full_url, properties.user_login_name)
            )

        outcome.state = deletion.state
        return outcome

    def _record_abort(
        self, properties: DeletionProperties, message: str, error: RecycleBinError
    ) -> None:
        """삭제 취소로 바꾸지 않는 오류를 전파 전에 기록"""
        logger.error(
            f"삭제 처리 중단: {properties.full_url}, 오류: {error.describe()}"
        )
        try:
            self.audit_sink.write(message)
        except RecycleBinError as audit_error:
            logger.error(f"감사 로그 기록 실패: {audit_error.describe()}")
