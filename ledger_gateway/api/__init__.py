"""API Layer: FastAPI routes, renderers and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Success responses are 200; every failure is an empty 500

Design Decisions:
    - Thin routes delegate to the gateway service
"""
