"""Users Application Layer.

Use Cases (Commands/Queries)와 Ports를 정의합니다.

Components:
    - commands/: Command Use Cases (Interactors)
    - queries/: Query Use Cases
    - common/ports/: Gateway 인터페이스
    - common/dto/: 데이터 전송 객체
    - common/exceptions/: 애플리케이션 예외
"""
