"""
데이터 모델 정의

삭제 전 백업 파이프라인과 훅 등록 관리에서 사용하는 값 객체들입니다.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

from config.constants import (
    DeletionStatus,
    DeploymentObjectType,
    EventReceiverType,
    ExportMethod,
    IncludeSecurity,
    InterceptorState,
    ScopeKind,
)


@dataclass(frozen=True)
class Container:
    """
    사이트 계층의 노드

    Attributes:
        url: 절대 URL
        server_relative_url: 서버 상대 경로 (예: /sites/finance/teamA)
        name: 리프 이름
        is_root: 사이트 모음의 루트 사이트 여부
        child_count: 하위 사이트 수
    """

    url: str
    server_relative_url: str
    name: str = ""
    is_root: bool = False
    child_count: int = 0

    @property
    def has_children(self) -> bool:
        return self.child_count > 0

    @property
    def hook_event_type(self) -> EventReceiverType:
        """루트 사이트는 사이트 모음 삭제 훅, 그 외는 사이트 삭제 훅"""
        if self.is_root:
            return EventReceiverType.SITE_DELETING
        return EventReceiverType.WEB_DELETING


@dataclass(frozen=True)
class FeatureScope:
    """기능이 활성화된 대상 (애플리케이션 전체 또는 단일 사이트)"""

    kind: ScopeKind
    target: Any

    @classmethod
    def for_application(cls, application: Any) -> "FeatureScope":
        return cls(ScopeKind.APPLICATION, application)

    @classmethod
    def for_container(cls, container_handle: Any) -> "FeatureScope":
        return cls(ScopeKind.CONTAINER, container_handle)


@dataclass(frozen=True)
class BackupDestination:
    """백업 파일 위치"""

    folder: Path
    stem: str
    extension: str = ".bak"

    @property
    def file_name(self) -> str:
        return f"{self.stem}{self.extension}"

    @property
    def path(self) -> Path:
        return self.folder / self.file_name


@dataclass(frozen=True)
class HookRegistration:
    """컨테이너에 설치된 삭제 이벤트 수신기 등록 정보"""

    registration_id: str
    event_type: EventReceiverType
    class_name: str
    assembly_name: str
    sequence_number: int


@dataclass
class ExportObject:
    """내보내기 대상 객체"""

    url: str
    type: DeploymentObjectType = DeploymentObjectType.WEB
    exclude_children: bool = True


@dataclass
class ExportSettings:
    """사이트 내보내기 작업 설정"""

    site_url: str
    base_file_name: str
    file_location: str
    export_method: ExportMethod = ExportMethod.EXPORT_ALL
    exclude_dependencies: bool = False
    include_security: IncludeSecurity = IncludeSecurity.ALL
    export_objects: List[ExportObject] = field(default_factory=list)


@dataclass
class DeletionProperties:
    """
    호스트가 전달하는 삭제 이벤트 속성

    cancel / error_message 는 삭제를 취소할 때 인터셉터가 채웁니다.
    """

    full_url: str
    server_relative_url: str
    user_login_name: str
    web_name: str = ""
    web_url: str = ""
    cancel: bool = False
    error_message: str = ""


@dataclass
class DeletionOutcome:
    """삭제 허용/취소 결과"""

    status: DeletionStatus
    reason: str = ""
    state: InterceptorState = InterceptorState.IDLE
    error: Optional[Exception] = None
    destination: Optional[BackupDestination] = None

    @classmethod
    def allow(
        cls, destination: Optional[BackupDestination] = None
    ) -> "DeletionOutcome":
        return cls(DeletionStatus.ALLOW, destination=destination)

    @classmethod
    def cancel(cls, reason: str, error: Optional[Exception] = None) -> "DeletionOutcome":
        return cls(DeletionStatus.CANCEL, reason=reason, error=error)

    @property
    def is_allowed(self) -> bool:
        return self.status == DeletionStatus.ALLOW

    @property
    def is_cancelled(self) -> bool:
        return self.status == DeletionStatus.CANCEL
