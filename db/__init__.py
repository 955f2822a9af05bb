"""
db/ - Database Layer
====================
Holds the PostgreSQL query executor, the visitor SQL catalog and schema setup.
This layer sits at the bottom of the stack; repositories build on it.
"""
