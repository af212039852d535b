"""
Core utilities shared across the Person API.

This package hosts configuration helpers (env vars, database URL, date
format) and cross-cutting concerns such as logging setup. Routers, services
and repositories should read settings from here instead of os.environ.
"""
