"""
backend HTTP 라우터 패키지.
HTTP routers of the backend.
"""
