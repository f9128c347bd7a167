"""Data stores for persistence and caching.

Stores handle:
- Redis: connection lifecycle, key naming, TTL policies

No business/ranking logic in stores - that belongs in services.
"""
