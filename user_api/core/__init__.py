"""
Core utilities shared across the user API.

This package hosts configuration helpers (env vars, paging limits) and the
logging setup. Routers, services and repositories depend on these primitives
instead of reading os.environ or configuring sinks themselves.
"""
