"""
작업 기본 클래스

기능 활성화/비활성화처럼 한 번 실행되는 관리 작업이 상속받는 기본 클래스를 정의합니다.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Any, Optional

from config.constants import JobStatus, JobType


@dataclass
class JobConfig:
    """작업 설정"""

    job_name: str
    job_type: JobType
    enabled: bool = True
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class JobResult:
    """작업 실행 결과"""

    job_name: str
    job_type: JobType
    status: JobStatus
    start_time: datetime
    end_time: Optional[datetime] = None
    processed_records: int = 0
    error_message: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def duration_seconds(self) -> float:
        """실행 시간 (초)"""
        if self.end_time and self.start_time:
            return (self.end_time - self.start_time).total_seconds()
        return 0.0

    @property
    def is_success(self) -> bool:
        """성공 여부"""
        return self.status == JobStatus.COMPLETED

    @property
    def is_failure(self) -> bool:
        """실패 여부"""
        return self.status == JobStatus.FAILED


class BaseJob(ABC):
    """작업 기본 클래스"""

    def __init__(self, config: JobConfig):
        self.config = config
        self.logger = logging.getLogger(f"{__name__}.{config.job_name}")
        self._result = None

    @abstractmethod
    def execute(self) -> JobResult:
        """
        작업 실행 로직

        하위 클래스에서 반드시 구현해야 합니다.

        Returns:
            JobResult: 작업 실행 결과
        """
        pass

    def pre_execute(self) -> bool:
        """
        작업 실행 전 처리

        Returns:
            bool: 계속 실행할지 여부
        """
        if not self.config.enabled:
            return False
        self.logger.info(f"작업 실행 전 처리 시작: {self.config.job_name}")
        return True

    def post_execute(self, result: JobResult) -> None:
        """작업 실행 후 처리"""
        self.logger.info(
            f"작업 실행 후 처리: {self.config.job_name}, 상태: {result.status.value}"
        )

    def on_failure(self, error: Exception) -> None:
        """작업 실패 시 처리"""
        self.logger.error(f"작업 실패 처리: {self.config.job_name}, 오류: {str(error)}")

    def run(self) -> JobResult:
        """
        작업 실행 메인 메서드

        실패는 결과에 기록되며, 순회는 첫 오류에서 중단됩니다.

        Returns:
            JobResult: 작업 실행 결과
        """
        result = JobResult(
            job_name=self.config.job_name,
            job_type=self.config.job_type,
            status=JobStatus.PENDING,
            start_time=datetime.now(),
        )

        try:
            if not self.pre_execute():
                result.status = JobStatus.SKIPPED
                result.end_time = datetime.now()
                self.logger.info(f"작업 건너뜀: {self.config.job_name}")
                self._result = result
                return result

            result.status = JobStatus.RUNNING
            self.logger.info(f"작업 실행 시작: {self.config.job_name}")

            result = self.execute()
            result.status = JobStatus.COMPLETED
            result.end_time = datetime.now()

            self.logger.info(
                f"작업 실행 완료: {self.config.job_name}, "
                f"처리 사이트: {result.processed_records}, "
                f"소요 시간: {result.duration_seconds:.2f}초"
            )

            self.post_execute(result)

        except Exception as e:
            result.status = JobStatus.FAILED
            result.end_time = datetime.now()
            result.error_message = str(e)

            self.logger.error(
                f"작업 실행 실패: {self.config.job_name}, "
                f"오류: {str(e)}, "
                f"소요 시간: {result.duration_seconds:.2f}초"
            )

            self.on_failure(e)

        self._result = result
        return result

    @property
    def last_result(self) -> Optional[JobResult]:
        """마지막 실행 결과"""
        return self._result

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.config.job_name})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"name='{self.config.job_name}', "
            f"type={self.config.job_type.value}, "
            f"enabled={self.config.enabled})"
        )
