"""Services Layer — authentication and review operations.

Invariants:
    - Services talk to storage only through repository Protocols
    - Every failure leaves as a typed ReviewApiError
"""
