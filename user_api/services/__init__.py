"""
High-level use cases for the user API.

Service modules orchestrate repositories to implement business rules (soft
delete, restore, paging). Routers call these services instead of touching the
database directly.
"""
