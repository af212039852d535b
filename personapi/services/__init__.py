"""
High-level use cases for the Person API.

Routers call these services instead of talking to repositories directly.
"""
