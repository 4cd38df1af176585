"""
상수 정의 모듈

사이트 휴지통(삭제 전 백업) 시스템에서 사용하는 상수들을 정의합니다.
"""

from enum import Enum


class JobType(Enum):
    """배치 작업 타입"""

    FEATURE_ACTIVATION = "feature_activation"
    FEATURE_DEACTIVATION = "feature_deactivation"


class JobStatus(Enum):
    """작업 상태"""

    PENDING = "pending"
    RUNNING = "running"
    SUCCESS = "success"
    COMPLETED = "success"  # 하위 호환성을 위한 별칭
    FAILED = "failure"
    FAILURE = "failure"  # 하위 호환성을 위한 별칭
    SKIPPED = "skipped"


class ContainerTier(Enum):
    """컨테이너 계층"""

    COLLECTION = "collection"  # Tier A: 사이트 모음
    CONTAINER = "container"  # Tier B: 사이트


class ScopeKind(Enum):
    """기능(feature)이 활성화된 대상 종류"""

    APPLICATION = "application"
    CONTAINER = "container"


class EventReceiverType(Enum):
    """삭제 이벤트 수신기 타입"""

    SITE_DELETING = "SiteDeleting"  # 루트 사이트 → 사이트 모음 삭제
    WEB_DELETING = "WebDeleting"  # 하위 사이트 삭제


class DeletionStatus(Enum):
    """삭제 요청 처리 결과"""

    ALLOW = "allow"
    CANCEL = "cancel"


class InterceptorState(Enum):
    """삭제 인터셉터 상태"""

    IDLE = "idle"
    ENTERING = "entering"
    BACKING_UP = "backing_up"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ExportMethod(Enum):
    """내보내기 방식"""

    EXPORT_ALL = "ExportAll"


class IncludeSecurity(Enum):
    """내보내기 시 보안 정보 포함 범위"""

    ALL = "All"


class DeploymentObjectType(Enum):
    """내보내기 대상 객체 타입"""

    SITE = "Site"
    WEB = "Web"


class EventLogSeverity(Enum):
    """시스템 이벤트 로그 심각도"""

    ERROR = "Error"
    WARNING = "Warning"
    INFORMATION = "Information"


# 설정 문서 키 (XPath 형식)
CONFIG_KEYS = {
    "backup_folder": "//backupFolder",
    "assembly_name": "//assemblyName",
    "sequence_number": "//sequenceNumber",
}

# 감사 로그 / 시스템 이벤트 로그 메시지
MESSAGES = {
    "security_exception": "A security exception occurred in {0}. The refused permission set is {1}. Details: {2} ",
    "configuration_exception": "Error in reading configuration from Configuration.xml.  Details: {0}.",
    "entering_site_delete": "Entering SPSite delete method on {0}.\n\tRequested by user:  {1} ",
    "exiting_site_delete": "Backup and delete of SPSite {0} completed successfully.",
    "entering_web_delete": "Entering SPWeb delete method on {0}.\n\tRequested by user: {1}",
    "exiting_web_delete": "Backup and delete of SPWeb {0} completed successfully.",
    "general_exception": "The backup operation terminated abnormally due to {0}",
    "site_delete_failure": "Exception Occured {0}",
    "web_delete_failure": "An unhandled exception has occurred in the SPWeb delete method {0}",
}

# 백업 파일 구성
BACKUP_LAYOUT = {
    "sites_folder": "Sites",
    "log_folder": "Log",
    "log_file_name": "RecycleBin.log",
    "extension": ".bak",
}

# 시스템 이벤트 로그
EVENT_LOG = {
    "source": "SharePoint Site Recycle Bin",
    "log_name": "Application",
    "event_id": 1000,
}

# 훅 등록 시 사용하는 수신기 클래스 식별자
RECEIVER_CLASS_NAME = "recycle_bin.interceptor.DeleteEventReceiver"

# 날짜 형식 (시간은 12시간제, 밀리초는 별도로 3자리 덧붙임)
DATE_FORMATS = {
    "audit_timestamp": "(%Y:%m:%d %I:%M:%S.",
    "disambiguator": "(%Y-%m-%d-%I-%M-%S-",
}
