"""
models/ - Domain Models
========================
Plain dataclasses for the rows the database returns to the client.
"""
