"""
Application layer for the departments bounded context.

The DepartmentService coordinates the domain rules and the
DepartmentRepository port. No framework or infrastructure imports allowed.
"""
