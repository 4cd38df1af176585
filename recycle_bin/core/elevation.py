"""
권한 상승 실행 범위

작업 단위를 상승된 권한으로 실행하고, 정상 종료/예외와 관계없이
범위를 벗어날 때 원래 권한으로 복귀시킵니다.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from recycle_bin.core.error_handling import RecycleBinSecurityError
from recycle_bin.core.platform import HostPlatform

logger = logging.getLogger(__name__)

# 스레드별 상승 여부 (재진입 금지)
_state = threading.local()


def is_elevated() -> bool:
    return getattr(_state, "active", False)


@contextmanager
def elevated_scope(platform: HostPlatform) -> Iterator[None]:
    """
    권한 상승 범위

    Raises:
        RecycleBinSecurityError: 재진입 또는 권한 거부
    """
    if is_elevated():
        raise RecycleBinSecurityError("권한 상승 범위는 중첩할 수 없습니다")

    try:
        platform.elevate()
    except PermissionError as e:
        raise RecycleBinSecurityError(
            f"권한 상승 실패: {e}", refused=str(e), cause=e
        ) from e

    _state.active = True
    logger.debug("권한 상승 범위 진입")
    try:
        yield
    except PermissionError as e:
        raise RecycleBinSecurityError(
            f"권한 상승 범위 내 접근 거부: {e}", refused=str(e), cause=e
        ) from e
    finally:
        _state.active = False
        platform.revert()
        logger.debug("권한 상승 범위 종료")
