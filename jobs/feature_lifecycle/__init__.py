"""
삭제 훅 기능 활성화/비활성화 작업 모듈
"""

from .feature_job import FeatureActivationJob, FeatureDeactivationJob

__all__ = ["FeatureActivationJob", "FeatureDeactivationJob"]
