"""
Departments bounded context: domain layer.

Contains the Department entity, its field rules, the error taxonomy
and the persistence port. No framework imports, no IO.
"""
