"""Newsletter Application Package — subscription form handler and health probes.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
