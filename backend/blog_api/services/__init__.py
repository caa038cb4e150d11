"""Services Layer — post mapper and post service.

Invariants:
    - Services depend on core.repository_protocols, never on a concrete repository
"""
