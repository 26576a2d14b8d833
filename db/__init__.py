"""
db/ - Database Layer
====================
Handles the PostgreSQL connection, database creation, and execution of the
SQL scripts that define the schema, functions, procedures and triggers.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
