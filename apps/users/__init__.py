"""Users Application.

Clean Architecture 기반 사용자 서비스입니다.

Layers:
    - domain/: 순수 비즈니스 로직 (User 애그리거트, 필드 갱신 규칙)
    - application/: Use Cases (Commands/Queries)
    - infrastructure/: 외부 시스템 연결 (PostgreSQL, Users API)
    - presentation/: HTTP 인터페이스
    - setup/: 설정 및 로깅
"""

__version__ = "1.0.0"
