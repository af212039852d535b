"""Person API: CRUD for people and their phone numbers."""

__version__ = "1.0.0"
