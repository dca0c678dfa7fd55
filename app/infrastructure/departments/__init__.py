"""
Infrastructure adapters for the departments bounded context.

Each adapter implements the DepartmentRepository port (ABC):
a SQLAlchemy-backed repository for real databases and an in-memory
repository for tests and database-free runs.
"""
