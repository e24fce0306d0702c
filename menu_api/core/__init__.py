"""
Core utilities shared across the menu API.

Configuration, the error taxonomy and logging setup live here so that
routers, services and repositories do not read os.environ directly.
"""
