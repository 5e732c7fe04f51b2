"""Reviews API Package — API-key gated CRUD service for product reviews.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
