"""
백업 실행 모듈

삭제 직전 사이트 모음/사이트의 백업을 권한 상승 범위 안에서 수행합니다.
경로 계산, 디렉토리 생성, 백업 호출 모두 같은 범위 안에서 실행되며
범위는 모든 종료 경로에서 해제됩니다.
"""

import logging

from config.constants import MESSAGES, ContainerTier, DeploymentObjectType
from recycle_bin.core.elevation import elevated_scope
from recycle_bin.core.error_handling import BackupError
from recycle_bin.core.models import (
    DeletionOutcome,
    DeletionProperties,
    ExportObject,
    ExportSettings,
)
from recycle_bin.core.platform import HostPlatform
from recycle_bin.naming import BackupPathResolver

logger = logging.getLogger(__name__)


def format_failure(error: Exception) -> str:
    """사용자에게 보여줄 진단 메시지"""
    detail = error.describe() if isinstance(error, BackupError) else repr(error)
    return MESSAGES["general_exception"].format(detail)


class BackupExecutor:
    """계층별 백업 실행기"""

    def __init__(self, platform: HostPlatform, resolver: BackupPathResolver):
        self.platform = platform
        self.resolver = resolver

    def backup_collection(self, properties: DeletionProperties) -> DeletionOutcome:
        """
        사이트 모음 전체 백업

        BackupError 는 Cancel 결과로 변환하고, 그 외 오류는 전파합니다.
        """
        try:
            with elevated_scope(self.platform):
                destination = self.resolver.resolve(
                    ContainerTier.COLLECTION,
                    properties.server_relative_url,
                    url=properties.full_url,
                )
                application = self.platform.lookup_application(properties.full_url)
                logger.info(
                    f"사이트 모음 백업 시작: {properties.full_url} → {destination.path}"
                )
                application.backup_collection(
                    properties.full_url,
                    destination.path,
                    overwrite=True,
                    include_all=True,
                )
        except BackupError as e:
            logger.error(f"사이트 모음 백업 실패: {properties.full_url}, 오류: {e}")
            return DeletionOutcome.cancel(format_failure(e), error=e)

        return DeletionOutcome.allow(destination)

    def backup_container(self, properties: DeletionProperties) -> DeletionOutcome:
        """
        사이트 내보내기

        루트가 아니면서 하위 사이트가 있는 사이트는 내보내지 않고 허용합니다.
        하위 사이트는 각각 삭제될 때 따로 백업됩니다.
        """
        try:
            with elevated_scope(self.platform):
                with self.platform.open_container(properties.full_url) as handle:
                    container = handle.container
                    if not container.is_root and container.has_children:
                        logger.info(
                            f"하위 사이트가 있어 내보내기 생략: {properties.full_url} "
                            f"(하위 사이트 {container.child_count}개)"
                        )
                        return DeletionOutcome.allow()

                    web_url = properties.web_url or container.url
                    destination = self.resolver.resolve(
                        ContainerTier.CONTAINER,
                        properties.server_relative_url,
                        name=properties.web_name or container.name,
                        url=web_url,
                    )
                    settings = self._build_export_settings(
                        web_url, destination.file_name, str(destination.folder)
                    )
                    logger.info(f"사이트 내보내기 시작: {web_url} → {destination.path}")
                    self.platform.run_export(settings)
        except BackupError as e:
            logger.error(f"사이트 내보내기 실패: {properties.full_url}, 오류: {e}")
            return DeletionOutcome.cancel(format_failure(e), error=e)

        return DeletionOutcome.allow(destination)

    @staticmethod
    def _build_export_settings(
        web_url: str, base_file_name: str, file_location: str
    ) -> ExportSettings:
        settings = ExportSettings(
            site_url=web_url,
            base_file_name=base_file_name,
            file_location=file_location,
        )
        settings.export_objects.append(
            ExportObject(
                url=web_url,
                type=DeploymentObjectType.WEB,
                exclude_children=True,
            )
        )
        return settings

    def backup(
        self, tier: ContainerTier, properties: DeletionProperties
    ) -> DeletionOutcome:
        if tier == ContainerTier.COLLECTION:
            return self.backup_collection(properties)
        return self.backup_container(properties)
