#!/usr/bin/env python3
"""
삭제 훅 기능 활성화/비활성화 실행 도구

호스트 어댑터는 RECYCLE_BIN_PLATFORM_FACTORY (module:callable) 로 지정합니다.

사용 예:
  python run_feature_job.py activate https://portal
  python run_feature_job.py deactivate https://portal
  python run_feature_job.py activate https://portal/sites/finance/teamA --site
"""

import argparse
import importlib
import sys
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

from config.settings import get_app_settings  # noqa: E402
from jobs.feature_lifecycle import FeatureActivationJob, FeatureDeactivationJob  # noqa: E402
from recycle_bin.core.error_handling import ConfigurationError  # noqa: E402
from recycle_bin.core.logger import get_logger_instance  # noqa: E402
from recycle_bin.core.models import FeatureScope  # noqa: E402
from recycle_bin.core.platform import HostPlatform  # noqa: E402
from recycle_bin.lifecycle import HookLifecycleManager  # noqa: E402


def load_platform(factory_path: str) -> HostPlatform:
    """`module:callable` 형식의 팩토리로 호스트 어댑터 생성"""
    if not factory_path or ":" not in factory_path:
        raise ConfigurationError(
            "RECYCLE_BIN_PLATFORM_FACTORY 는 module:callable 형식이어야 합니다",
            config_key="RECYCLE_BIN_PLATFORM_FACTORY",
        )
    module_name, attribute = factory_path.split(":", 1)
    factory = getattr(importlib.import_module(module_name), attribute)
    return factory()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="사이트 휴지통 삭제 훅 관리")
    parser.add_argument("command", choices=["activate", "deactivate"])
    parser.add_argument("url", help="애플리케이션 또는 사이트 URL")
    parser.add_argument(
        "--site", action="store_true", help="단일 사이트 범위로 실행"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_app_settings()
    job_logger = get_logger_instance()

    platform = load_platform(settings.recycle_bin.platform_factory)
    if args.site:
        scope = FeatureScope.for_container(platform.open_container(args.url))
    else:
        scope = FeatureScope.for_application(platform.lookup_application(args.url))

    manager = HookLifecycleManager(platform, settings=settings.recycle_bin)
    job_class = FeatureActivationJob if args.command == "activate" else FeatureDeactivationJob
    job = job_class(manager, scope)

    job_logger.log_job_start(job.config.job_name, job.config.job_type.value)
    result = job.run()
    if result.is_success:
        job_logger.log_job_complete(
            job.config.job_name, result.processed_records, result.duration_seconds
        )
        return 0

    job_logger.log_job_failure(
        job.config.job_name, result.error_message or "", result.duration_seconds
    )
    return 1


if __name__ == "__main__":
    sys.exit(main())
