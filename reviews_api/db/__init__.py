"""Database Declarations — SQLAlchemy Base shared by the ORM models.

Invariants:
    - No engine or session lives here (infrastructure/database.py owns them)
"""
