"""Users Infrastructure Layer.

외부 시스템(DB, 원격 Users API)과의 연결을 담당합니다.

Components:
    - adapters/: 도메인 포트 구현체 (UserIdGenerator)
    - persistence_postgres/: PostgreSQL 연결, ORM 모델, Repository 구현체
    - http_clients/: 원격 Users API 클라이언트
"""
