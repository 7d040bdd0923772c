"""
db/ - Database Layer
====================
Owns the PostgreSQL connection pool and the error types raised when the
backing store cannot be reached or returns rows of an unexpected shape.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
