"""
삭제 훅 기능 활성화/비활성화 작업

애플리케이션(또는 단일 사이트) 범위에 삭제 전 백업 훅을 설치하거나 제거합니다.
"""

from datetime import datetime
from typing import Optional

from config.constants import JobStatus, JobType
from recycle_bin.core.base_job import BaseJob, JobConfig, JobResult
from recycle_bin.core.models import FeatureScope
from recycle_bin.lifecycle import HookLifecycleManager


class _FeatureJob(BaseJob):
    """기능 범위 작업 공통 처리"""

    def __init__(
        self,
        config: JobConfig,
        manager: HookLifecycleManager,
        scope: FeatureScope,
    ):
        super().__init__(config)
        self.manager = manager
        self.scope = scope

    def _new_result(self) -> JobResult:
        return JobResult(
            job_name=self.config.job_name,
            job_type=self.config.job_type,
            status=JobStatus.RUNNING,
            start_time=datetime.now(),
        )


class FeatureActivationJob(_FeatureJob):
    """기능 활성화: 삭제 훅 설치"""

    def __init__(
        self,
        manager: HookLifecycleManager,
        scope: FeatureScope,
        config: Optional[JobConfig] = None,
    ):
        super().__init__(
            config
            or JobConfig(job_name="feature_activation", job_type=JobType.FEATURE_ACTIVATION),
            manager,
            scope,
        )

    def execute(self) -> JobResult:
        result = self._new_result()
        stats = self.manager.install(self.scope)
        result.processed_records = stats.containers
        result.metadata = {
            "scope": self.scope.kind.value,
            "collections": stats.collections,
            "registrations_added": stats.registrations_added,
        }
        return result


class FeatureDeactivationJob(_FeatureJob):
    """기능 비활성화: 삭제 훅 제거"""

    def __init__(
        self,
        manager: HookLifecycleManager,
        scope: FeatureScope,
        config: Optional[JobConfig] = None,
    ):
        super().__init__(
            config
            or JobConfig(
                job_name="feature_deactivation", job_type=JobType.FEATURE_DEACTIVATION
            ),
            manager,
            scope,
        )

    def execute(self) -> JobResult:
        result = self._new_result()
        stats = self.manager.uninstall(self.scope)
        result.processed_records = stats.containers
        result.metadata = {
            "scope": self.scope.kind.value,
            "collections": stats.collections,
            "registrations_removed": stats.registrations_removed,
        }
        return result
