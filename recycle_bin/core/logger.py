"""
로깅 설정 및 관리 모듈

애플리케이션 전체의 로깅을 중앙에서 관리합니다.
"""

import logging
import logging.handlers
from datetime import datetime
from pathlib import Path
from typing import Optional

from config.settings import LoggingConfig, get_logging_config


class RecycleBinLogger:
    """사이트 휴지통용 로거 클래스"""

    def __init__(self, config: Optional[LoggingConfig] = None):
        self.config = config or get_logging_config()
        self.log_dir = Path(self.config.log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self._setup_logging()

    def _setup_logging(self) -> None:
        """로깅 설정"""
        level = getattr(logging, self.config.level.upper(), logging.INFO)

        # 루트 로거 가져오기
        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        root_logger.handlers.clear()

        formatter = logging.Formatter(self.config.format)

        # 콘솔 핸들러
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

        # 파일 핸들러 (일반 로그)
        log_file = (
            self.log_dir
            / f"{self.config.file_prefix}_{datetime.now().strftime('%Y%m%d')}.log"
        )
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=self.config.max_bytes,
            backupCount=self.config.backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

        # 에러 로그 파일 핸들러
        error_log_file = (
            self.log_dir
            / f"{self.config.file_prefix}_error_{datetime.now().strftime('%Y%m%d')}.log"
        )
        error_handler = logging.handlers.RotatingFileHandler(
            error_log_file,
            maxBytes=self.config.max_bytes,
            backupCount=self.config.backup_count,
            encoding="utf-8",
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)
        root_logger.addHandler(error_handler)

    def get_logger(self, name: str) -> logging.Logger:
        """특정 이름의 로거 반환"""
        return logging.getLogger(name)

    def log_job_start(self, job_name: str, job_type: str) -> None:
        """작업 시작 로그"""
        logger = self.get_logger(f"job.{job_name}")
        logger.info(f"작업 시작 - 작업명: {job_name}, 타입: {job_type}")

    def log_job_complete(
        self, job_name: str, processed_records: int, duration: float
    ) -> None:
        """작업 완료 로그"""
        logger = self.get_logger(f"job.{job_name}")
        logger.info(
            f"작업 완료 - 작업명: {job_name}, "
            f"처리 컨테이너: {processed_records}, 소요시간: {duration:.2f}초"
        )

    def log_job_failure(
        self, job_name: str, error_message: str, duration: float
    ) -> None:
        """작업 실패 로그"""
        logger = self.get_logger(f"job.{job_name}")
        logger.error(
            f"작업 실패 - 작업명: {job_name}, "
            f"오류: {error_message}, 소요시간: {duration:.2f}초"
        )


# 전역 로거 인스턴스
_logger_instance = None


def get_logger_instance() -> RecycleBinLogger:
    """전역 로거 인스턴스 반환"""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = RecycleBinLogger()
    return _logger_instance
