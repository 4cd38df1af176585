"""
백업 경로 결정 모듈

컨테이너 식별 정보와 설정된 백업 폴더로부터 충돌하지 않는 백업 파일 경로를
계산합니다. 경로는 호출할 때마다 새로 계산하며 캐시하지 않습니다.

- 사이트 모음: <backupFolder>/Sites/<서버 상대 경로>.bak
- 사이트: <backupFolder>/<상위 경로>/<리프 이름>.bak

같은 이름의 파일이 이미 있으면 이름 뒤에 (yyyy-MM-dd-hh-mm-ss-mmm) 을 붙입니다.
확인은 기록 직전 한 번만 하며, 붙인 뒤 다시 확인하지 않습니다.
"""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional
from urllib.parse import urlparse

from config.constants import ContainerTier, DATE_FORMATS
from config.settings import RecycleBinConfig, get_recycle_bin_config
from recycle_bin.core.configuration import XmlConfigProvider
from recycle_bin.core.error_handling import FileSystemError
from recycle_bin.core.models import BackupDestination

logger = logging.getLogger(__name__)


def format_disambiguator(moment: datetime) -> str:
    """파일명 충돌 방지용 `(yyyy-MM-dd-hh-mm-ss-mmm)` 접미사"""
    return moment.strftime(DATE_FORMATS["disambiguator"]) + (
        f"{moment.microsecond // 1000:03d})"
    )


def to_local_separators(path: str) -> str:
    return path.replace("/", os.sep)


def collection_stem(server_relative_url: str, url: str = "") -> str:
    """사이트 모음 파일명: 앞의 구분자 하나를 뗀 서버 상대 경로"""
    stem = server_relative_url[1:] if server_relative_url.startswith("/") else server_relative_url
    stem = stem.rstrip("/")
    if not stem:
        # 루트 사이트 모음 ("/") 은 호스트 이름 사용
        stem = urlparse(url).hostname or "root"
    return to_local_separators(stem)


def parent_segment(server_relative_url: str) -> str:
    """첫 번째와 마지막 구분자 사이의 상위 경로"""
    first = server_relative_url.find("/")
    last = server_relative_url.rfind("/")
    if first < 0 or last <= first:
        return ""
    return server_relative_url[first:last]


def leaf_name(server_relative_url: str) -> str:
    return server_relative_url.rstrip("/").rsplit("/", 1)[-1]


class BackupPathResolver:
    """백업 파일 경로 결정기"""

    def __init__(
        self,
        config_provider: XmlConfigProvider,
        settings: Optional[RecycleBinConfig] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.config_provider = config_provider
        self.settings = settings or get_recycle_bin_config()
        self.clock = clock

    def _backup_folder(self) -> Path:
        return Path(self.config_provider.backup_folder)

    def resolve(
        self,
        tier: ContainerTier,
        server_relative_url: str,
        name: str = "",
        url: str = "",
    ) -> BackupDestination:
        """
        백업 경로 계산 및 디렉토리 생성

        Args:
            tier: 컨테이너 계층
            server_relative_url: 서버 상대 경로
            name: 사이트 리프 이름 (사이트 계층에서 사용)
            url: 절대 URL

        Returns:
            BackupDestination: 충돌을 피한 백업 위치

        Raises:
            ConfigurationError: 백업 폴더를 읽을 수 없는 경우
            FileSystemError: 디렉토리를 만들 수 없는 경우
        """
        base = self._backup_folder()

        if tier == ContainerTier.COLLECTION:
            folder = base / self.settings.sites_folder
            stem = collection_stem(server_relative_url, url)
        else:
            parent = parent_segment(server_relative_url).strip("/")
            folder = base / to_local_separators(parent) if parent else base
            stem = name or leaf_name(server_relative_url)

        destination = BackupDestination(folder, stem, self.settings.backup_extension)
        self._ensure_directory(destination.path.parent)

        if destination.path.exists():
            disambiguated = stem + format_disambiguator(self.clock())
            logger.info(
                f"백업 파일이 이미 존재하여 이름 변경: {destination.file_name} → "
                f"{disambiguated}{destination.extension}"
            )
            destination = BackupDestination(folder, disambiguated, destination.extension)

        return destination

    def _ensure_directory(self, directory: Path) -> None:
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            raise
        except OSError as e:
            raise FileSystemError(
                f"백업 디렉토리를 만들 수 없습니다: {directory}",
                path=str(directory),
                cause=e,
            ) from e
