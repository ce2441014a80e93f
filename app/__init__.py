"""
User Management API.

Application package root. A modular monolith using hexagonal
architecture (ports & adapters).

Bounded contexts:
    - users: Validation, partial updates and batch deletion of user records.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: SQLAlchemy adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
