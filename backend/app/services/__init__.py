"""
backend 나눗셈 서비스 패키지.
Backend division service package.

HTTP나 FastAPI에 직접 의존하지 않고 safediv_core 를 호출한다.
It calls into safediv_core without depending directly on HTTP or FastAPI.
"""
