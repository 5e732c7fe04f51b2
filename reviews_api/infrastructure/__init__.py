"""Infrastructure Layer — storage gateway and cross-cutting concerns.

Invariants:
    - Driver failures are mapped to StorageError before leaving this layer
    - Engine lifetime is owned by the application, not by module state
"""
