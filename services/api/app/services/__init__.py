"""Business logic services.

Services contain all business logic and are called by routes.
Services reach Redis through app.stores.redis.get_redis() and hold no state
between calls.
"""
