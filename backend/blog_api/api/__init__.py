"""API Layer — FastAPI routes, service wiring, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every failure leaves through error_handlers as the uniform error envelope
"""
