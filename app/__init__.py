"""
Department Catalog: validated management of organizational departments.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters) with domain-driven design.

Bounded contexts:
    - departments: Department records, field rules, name uniqueness, lookups.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases and orchestration.
    - infrastructure: Adapters (SQL, in-memory) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
