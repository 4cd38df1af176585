"""
호스트 플랫폼 인터페이스

사이트 계층 객체 모델, 백업/내보내기 엔진, 권한 상승 기능,
이벤트 수신기 등록 API 를 추상화합니다. 실제 호스트 어댑터가
이 클래스들을 구현합니다.

백업/내보내기 엔진 오류는 구현체가 BackupError 로 변환해야 합니다.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator, List

from config.constants import EventReceiverType
from recycle_bin.core.models import Container, ExportSettings, HookRegistration


class ContentHandle(ABC):
    """사용 후 즉시 해제해야 하는 호스트 리소스"""

    @abstractmethod
    def close(self) -> None:
        """리소스 해제"""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, tb):
        self.close()
        return False


class ContainerHandle(ContentHandle):
    """열린 사이트(Tier B) 핸들"""

    @property
    @abstractmethod
    def container(self) -> Container:
        """사이트 정보 스냅샷"""
        pass


class CollectionHandle(ContentHandle):
    """열린 사이트 모음(Tier A) 핸들"""

    @property
    @abstractmethod
    def url(self) -> str:
        pass

    @abstractmethod
    def all_containers(self) -> Iterator[ContainerHandle]:
        """루트를 포함한 모든 사이트를 깊이 우선으로 열거"""
        pass


class WebApplication(ABC):
    """사이트 모음들을 소유하는 애플리케이션 범위"""

    @abstractmethod
    def collections(self) -> Iterator[CollectionHandle]:
        """애플리케이션의 모든 사이트 모음 열거"""
        pass

    @abstractmethod
    def backup_collection(
        self,
        collection_url: str,
        file_path: Path,
        overwrite: bool = True,
        include_all: bool = True,
    ) -> None:
        """
        사이트 모음 전체 백업

        Raises:
            BackupError: 백업 엔진 실패
        """
        pass


class HostPlatform(ABC):
    """호스트 플랫폼 어댑터"""

    @abstractmethod
    def lookup_application(self, url: str) -> WebApplication:
        """URL 로부터 소유 애플리케이션 조회"""
        pass

    @abstractmethod
    def open_container(self, url: str) -> ContainerHandle:
        """URL 에 해당하는 사이트 열기"""
        pass

    @abstractmethod
    def run_export(self, settings: ExportSettings) -> None:
        """
        내보내기 작업을 동기적으로 실행

        Raises:
            BackupError: 내보내기 엔진 실패
        """
        pass

    @abstractmethod
    def elevate(self) -> None:
        """현재 스레드의 권한 상승"""
        pass

    @abstractmethod
    def revert(self) -> None:
        """권한 상승 해제"""
        pass

    @abstractmethod
    def add_registration(
        self,
        container: Container,
        event_type: EventReceiverType,
        class_name: str,
        assembly_name: str,
        sequence_number: int,
    ) -> HookRegistration:
        pass

    @abstractmethod
    def list_registrations(self, container: Container) -> List[HookRegistration]:
        """컨테이너의 현재 등록 목록 (호스트의 라이브 컬렉션일 수 있음)"""
        pass

    @abstractmethod
    def remove_registration(self, container: Container, registration_id: str) -> None:
        pass
