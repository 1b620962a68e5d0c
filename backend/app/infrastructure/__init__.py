"""Infrastructure Layer — database, auth collaborators and cross-cutting concerns.

Invariants:
    - Infrastructure may import core/ types and errors, never api/
"""
