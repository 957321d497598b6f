"""Services Layer — persistence operations invoked by route handlers.

Invariants:
    - Services receive their collaborators (session manager) as parameters
"""
