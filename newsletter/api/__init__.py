"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints respond with empty bodies; the status code is the contract

Design Decisions:
    - Thin routes delegate persistence to services
"""
