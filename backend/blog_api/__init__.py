"""Blog API Package — CRUD REST service for blog posts.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
