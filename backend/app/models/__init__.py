"""
backend에서 사용하는 Pydantic 기반 IO 모델 패키지.
Pydantic-based IO models used by the backend.

나눗셈 요청/응답 스키마를 포함한다.
It contains the division request/response schemas.
"""
