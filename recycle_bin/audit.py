"""
감사 로그 기록 모듈

<backupFolder>/Log/RecycleBin.log 에 타임스탬프가 붙은 줄을 추가만 합니다.
기존 내용은 다시 쓰거나 자르지 않습니다.
"""

import logging
import threading
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from config.constants import DATE_FORMATS, MESSAGES
from config.settings import RecycleBinConfig, get_recycle_bin_config
from recycle_bin.core.configuration import XmlConfigProvider
from recycle_bin.core.error_handling import FileSystemError, RecycleBinSecurityError


def format_audit_timestamp(moment: datetime) -> str:
    """`(yyyy:MM:dd hh:mm:ss.mmm):` 형식 타임스탬프"""
    return moment.strftime(DATE_FORMATS["audit_timestamp"]) + (
        f"{moment.microsecond // 1000:03d}):"
    )


class AuditSink:
    """감사 로그 파일 기록기

    로그 경로는 첫 기록 시 설정 문서에서 한 번 읽어 인스턴스에 보관합니다.
    """

    def __init__(
        self,
        config_provider: XmlConfigProvider,
        settings: Optional[RecycleBinConfig] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.config_provider = config_provider
        self.settings = settings or get_recycle_bin_config()
        self.clock = clock
        self.logger = logging.getLogger(__name__)
        self._lock = threading.Lock()
        self._log_dir: Optional[Path] = None

    @property
    def log_dir(self) -> Path:
        if self._log_dir is None:
            backup_folder = self.config_provider.backup_folder
            self._log_dir = Path(backup_folder) / self.settings.log_folder
        return self._log_dir

    @property
    def log_path(self) -> Path:
        return self.log_dir / self.settings.log_file_name

    def write(self, message: str) -> None:
        """
        감사 로그 한 줄 추가

        Raises:
            RecycleBinSecurityError: 로그 경로 접근 권한 거부
            FileSystemError: 로그 디렉토리/파일을 열 수 없는 경우
        """
        log_path = self.log_path
        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            with self._lock:
                with open(log_path, "a", encoding="utf-8", newline="") as stream:
                    stream.seek(0, 2)
                    stream.write(
                        f"{format_audit_timestamp(self.clock())} {message}\r\n"
                    )
                    stream.flush()
        except PermissionError as e:
            raise RecycleBinSecurityError(
                MESSAGES["security_exception"].format(
                    __name__, str(self.log_dir), e
                ),
                refused=str(self.log_dir),
                cause=e,
            ) from e
        except OSError as e:
            raise FileSystemError(
                f"감사 로그를 기록할 수 없습니다: {log_path}", path=str(log_path), cause=e
            ) from e

        self.logger.info(message)
