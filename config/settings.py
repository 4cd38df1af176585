"""
애플리케이션 설정 관리 모듈

환경 변수와 설정 값들을 중앙에서 관리합니다.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from dotenv import load_dotenv

from config.constants import BACKUP_LAYOUT, EVENT_LOG, RECEIVER_CLASS_NAME

# 환경 변수 로드
load_dotenv()

# 배포 위치 기준 고정 설정 문서 경로
DEFAULT_CONFIG_PATH = Path(__file__).parent / "Configuration.xml"


@dataclass
class RecycleBinConfig:
    """사이트 휴지통 설정"""

    config_path: str
    sites_folder: str = BACKUP_LAYOUT["sites_folder"]
    log_folder: str = BACKUP_LAYOUT["log_folder"]
    log_file_name: str = BACKUP_LAYOUT["log_file_name"]
    backup_extension: str = BACKUP_LAYOUT["extension"]
    event_source: str = EVENT_LOG["source"]
    event_log_name: str = EVENT_LOG["log_name"]
    event_id: int = EVENT_LOG["event_id"]
    use_nt_event_log: bool = False
    receiver_class_name: str = RECEIVER_CLASS_NAME
    platform_factory: str = ""


@dataclass
class LoggingConfig:
    """로깅 설정"""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_prefix: str = "site_recycle_bin"
    max_bytes: int = 10485760  # 10MB
    backup_count: int = 5
    log_dir: str = "logs"


@dataclass
class AppSettings:
    """전체 애플리케이션 설정"""

    debug: bool
    environment: str
    recycle_bin: RecycleBinConfig
    logging: LoggingConfig


def get_recycle_bin_config() -> RecycleBinConfig:
    """사이트 휴지통 설정 조회"""
    return RecycleBinConfig(
        config_path=os.getenv("RECYCLE_BIN_CONFIG_PATH", str(DEFAULT_CONFIG_PATH)),
        sites_folder=os.getenv("RECYCLE_BIN_SITES_FOLDER", BACKUP_LAYOUT["sites_folder"]),
        log_folder=os.getenv("RECYCLE_BIN_LOG_FOLDER", BACKUP_LAYOUT["log_folder"]),
        log_file_name=os.getenv(
            "RECYCLE_BIN_LOG_FILE_NAME", BACKUP_LAYOUT["log_file_name"]
        ),
        backup_extension=os.getenv(
            "RECYCLE_BIN_BACKUP_EXTENSION", BACKUP_LAYOUT["extension"]
        ),
        event_source=os.getenv("RECYCLE_BIN_EVENT_SOURCE", EVENT_LOG["source"]),
        event_log_name=os.getenv("RECYCLE_BIN_EVENT_LOG_NAME", EVENT_LOG["log_name"]),
        event_id=int(os.getenv("RECYCLE_BIN_EVENT_ID", str(EVENT_LOG["event_id"]))),
        use_nt_event_log=os.getenv("RECYCLE_BIN_USE_NT_EVENT_LOG", "false").lower()
        == "true",
        receiver_class_name=os.getenv(
            "RECYCLE_BIN_RECEIVER_CLASS", RECEIVER_CLASS_NAME
        ),
        platform_factory=os.getenv("RECYCLE_BIN_PLATFORM_FACTORY", ""),
    )


def get_logging_config() -> LoggingConfig:
    """로깅 설정 조회"""
    return LoggingConfig(
        level=os.getenv("LOG_LEVEL", "INFO"),
        format=os.getenv(
            "LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        ),
        file_prefix=os.getenv("LOG_FILE_PREFIX", "site_recycle_bin"),
        max_bytes=int(os.getenv("LOG_MAX_BYTES", "10485760")),
        backup_count=int(os.getenv("LOG_BACKUP_COUNT", "5")),
        log_dir=os.getenv("LOG_DIR", "logs"),
    )


def get_app_settings() -> AppSettings:
    """전체 애플리케이션 설정 조회"""
    return AppSettings(
        debug=os.getenv("DEBUG", "False").lower() == "true",
        environment=os.getenv("ENVIRONMENT", "development"),
        recycle_bin=get_recycle_bin_config(),
        logging=get_logging_config(),
    )
