"""
통합 오류 처리 프레임워크

삭제 전 백업 파이프라인 전체에서 일관된 오류 분류를 제공합니다.
백업/내보내기 실패(BackupError)만 삭제 취소로 변환되며,
나머지 오류는 호출자에게 그대로 전파됩니다.
"""

import sys
import traceback
from datetime import datetime
from enum import Enum
from typing import Dict, Any, Optional
from dataclasses import dataclass, field


class ErrorSeverity(Enum):
    """오류 심각도 수준"""

    CRITICAL = "critical"  # 작업 중단 수준
    HIGH = "high"  # 주요 기능 영향
    MEDIUM = "medium"  # 일부 기능 영향
    LOW = "low"  # 경미한 문제


class ErrorCategory(Enum):
    """오류 카테고리"""

    CONFIGURATION_ERROR = "config"  # 설정 문서 관련
    FILESYSTEM_ERROR = "filesystem"  # 디렉토리/파일 관련
    BACKUP_ERROR = "backup"  # 백업/내보내기 관련
    SECURITY_ERROR = "security"  # 권한 관련


@dataclass
class ErrorContext:
    """오류 컨텍스트 정보"""

    error_id: str = ""
    operation: str = ""
    url: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리로 변환 (JSON 직렬화용)"""
        return {
            "error_id": self.error_id,
            "operation": self.operation,
            "url": self.url,
            "metadata": self.metadata,
            "timestamp": self.timestamp.isoformat(),
        }


class RecycleBinError(Exception):
    """프로젝트 기본 예외 클래스"""

    def __init__(
        self,
        message: str,
        error_code: str = "RB_UNKNOWN",
        category: ErrorCategory = ErrorCategory.BACKUP_ERROR,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        context: Optional[ErrorContext] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.cause = cause

        # 고유 오류 ID 생성
        if not self.context.error_id:
            self.context.error_id = self._generate_error_id()

    def _generate_error_id(self) -> str:
        """고유 오류 ID 생성"""
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return f"{self.error_code}_{timestamp}_{id(self) % 10000:04d}"

    def describe(self) -> str:
        """사용자/로그용 상세 설명 (원인 예외 포함)"""
        detail = f"{self.__class__.__name__}: {self.message}"
        if self.cause is not None:
            detail += f" ({self.cause.__class__.__name__}: {self.cause})"
        return detail

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리로 변환"""
        return {
            "error_id": self.context.error_id,
            "error_code": self.error_code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "context": self.context.to_dict(),
            "cause": str(self.cause) if self.cause else None,
            "traceback": traceback.format_exc() if sys.exc_info()[0] else None,
        }


# ========== 특화된 예외 클래스들 ==========


class ConfigurationError(RecycleBinError):
    """설정 문서를 읽을 수 없거나 키가 없는 경우"""

    def __init__(self, message: str, config_key: str = "", **kwargs):
        super().__init__(
            message,
            error_code="RB_CONFIG_ERROR",
            category=ErrorCategory.CONFIGURATION_ERROR,
            severity=ErrorSeverity.HIGH,
            **kwargs,
        )
        self.config_key = config_key
        self.context.metadata.update({"config_key": config_key})


class FileSystemError(RecycleBinError):
    """백업/로그 디렉토리 생성 또는 파일 열기 실패"""

    def __init__(self, message: str, path: str = "", **kwargs):
        super().__init__(
            message,
            error_code="RB_FS_ERROR",
            category=ErrorCategory.FILESYSTEM_ERROR,
            severity=ErrorSeverity.HIGH,
            **kwargs,
        )
        self.path = path
        self.context.metadata.update({"path": path})


class BackupError(RecycleBinError):
    """호스트 플랫폼의 백업/내보내기 실패

    호스트 어댑터는 백업 엔진 오류를 이 예외로 변환해야 합니다.
    인터셉터는 이 예외만 삭제 취소(Cancel)로 변환합니다.
    """

    def __init__(self, message: str, url: str = "", **kwargs):
        super().__init__(
            message,
            error_code="RB_BACKUP_ERROR",
            category=ErrorCategory.BACKUP_ERROR,
            **kwargs,
        )
        self.url = url
        self.context.url = url


class RecycleBinSecurityError(RecycleBinError):
    """권한 상승 범위 또는 파일 권한 거부"""

    def __init__(self, message: str, refused: str = "", **kwargs):
        super().__init__(
            message,
            error_code="RB_SECURITY_ERROR",
            category=ErrorCategory.SECURITY_ERROR,
            severity=ErrorSeverity.CRITICAL,
            **kwargs,
        )
        self.refused = refused
        self.context.metadata.update({"refused": refused})
