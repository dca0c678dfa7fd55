"""
Interfaces for the departments bounded context: the FastAPI router,
its Pydantic schemas and the dependency wiring.
"""
