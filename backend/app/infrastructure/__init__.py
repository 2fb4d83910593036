"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ domain logic
    - External SDK errors are not remapped here
"""
