"""
관리 작업 패키지
"""
