"""
High-level use cases for the menu API.

Routers call these services instead of touching a storage backend directly.
"""
