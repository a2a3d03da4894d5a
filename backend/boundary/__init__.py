"""
Boundary layer for external system integrations.

Handles all interactions with storage: the relational database, the
document store built on it, and the repositories over that store.
"""
