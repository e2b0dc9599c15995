"""Data stores for persistence and caching.

Stores handle:
- PostgreSQL: engine, sessions, declarative base
- Redis: response caching, TTL policies

No request/response shaping in stores - that belongs in services.
"""
