"""
삭제 훅 등록 관리

기능 활성화/비활성화 시 사이트 계층 전체를 순회하며 삭제 이벤트 수신기를
등록하거나 제거합니다. 삭제 요청 처리와는 독립적으로 동작합니다.

개별 사이트 처리 중 오류가 나면 나머지 순회를 중단하고 오류를 전파합니다.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from config.constants import ScopeKind
from config.settings import RecycleBinConfig, get_recycle_bin_config
from recycle_bin.core.configuration import XmlConfigProvider
from recycle_bin.core.models import Container, FeatureScope
from recycle_bin.core.platform import ContainerHandle, HostPlatform

logger = logging.getLogger(__name__)


@dataclass
class TraversalStats:
    """순회 결과 집계"""

    collections: int = 0
    containers: int = 0
    registrations_added: int = 0
    registrations_removed: int = 0


class HookLifecycleManager:
    """삭제 훅 설치/제거 관리자

    install 은 등록 전에 기존 등록을 확인하지 않으므로 반복 설치 시
    같은 순번의 등록이 중복될 수 있습니다. uninstall 은 일치하는 등록을
    모두 제거합니다.
    """

    def __init__(
        self,
        platform: HostPlatform,
        config_provider: Optional[XmlConfigProvider] = None,
        settings: Optional[RecycleBinConfig] = None,
    ):
        self.platform = platform
        self.config_provider = config_provider or XmlConfigProvider()
        self.settings = settings or get_recycle_bin_config()

    def install(self, scope: FeatureScope) -> TraversalStats:
        """범위 안의 모든 사이트에 삭제 훅 등록"""
        assembly_name = self.config_provider.assembly_name
        sequence_number = self.config_provider.sequence_number
        stats = TraversalStats()

        def register(container: Container) -> None:
            registration = self.platform.add_registration(
                container,
                container.hook_event_type,
                self.settings.receiver_class_name,
                assembly_name,
                sequence_number,
            )
            stats.registrations_added += 1
            logger.debug(
                f"훅 등록: {container.url} ({registration.event_type.value}, "
                f"순번 {sequence_number})"
            )

        self._traverse(scope, register, stats)
        logger.info(
            f"삭제 훅 설치 완료: 사이트 모음 {stats.collections}개, "
            f"사이트 {stats.containers}개, 등록 {stats.registrations_added}건"
        )
        return stats

    def uninstall(self, scope: FeatureScope) -> TraversalStats:
        """범위 안의 모든 사이트에서 설정된 순번의 삭제 훅 제거"""
        sequence_number = self.config_provider.sequence_number
        stats = TraversalStats()

        def unregister(container: Container) -> None:
            # 제거하면서 순회하므로 목록 사본 사용
            for registration in list(self.platform.list_registrations(container)):
                if registration.sequence_number != sequence_number:
                    continue
                self.platform.remove_registration(
                    container, registration.registration_id
                )
                stats.registrations_removed += 1
                logger.debug(f"훅 제거: {container.url} ({registration.registration_id})")

        self._traverse(scope, unregister, stats)
        logger.info(
            f"삭제 훅 제거 완료: 사이트 모음 {stats.collections}개, "
            f"사이트 {stats.containers}개, 제거 {stats.registrations_removed}건"
        )
        return stats

    def _traverse(
        self,
        scope: FeatureScope,
        visit: Callable[[Container], None],
        stats: TraversalStats,
    ) -> None:
        if scope.kind == ScopeKind.CONTAINER:
            self._visit_container(scope.target, visit, stats)
            return

        for collection in scope.target.collections():
            with collection:
                for handle in collection.all_containers():
                    self._visit_container(handle, visit, stats)
            stats.collections += 1

    @staticmethod
    def _visit_container(
        handle: ContainerHandle,
        visit: Callable[[Container], None],
        stats: TraversalStats,
    ) -> None:
        with handle:
            visit(handle.container)
        stats.containers += 1

    def feature_installed(self, scope: FeatureScope) -> None:
        """기능 설치 시 별도 처리 없음"""
        return

    def feature_uninstalling(self, scope: FeatureScope) -> None:
        """기능 제거 시 별도 처리 없음"""
        return
