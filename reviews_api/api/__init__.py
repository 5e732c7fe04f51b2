"""API Layer — FastAPI routes, response writer and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All responses are JSON built by response_writer.write_response()
"""
