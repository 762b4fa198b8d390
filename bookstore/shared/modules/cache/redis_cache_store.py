"""
Redis Cache Store

Key-value cache backed by Redis. Values are stored as JSON strings with an
expiry, so a missing key and an expired key look the same to callers.
"""
import json
import logging

import redis

from shared.modules.cache.cache_store import CacheStore

logger = logging.getLogger(__name__)


class RedisCacheStore(CacheStore):
    """
    A CacheStore implementation on top of a redis-py client.
    """

    def __init__(self, redis_client=None, host="localhost", port=6379, db=0):
        """
        Wraps an existing client, or creates one from host/port/db.

        Args:
            redis_client: An already constructed redis client.
            host (str): The Redis server hostname.
            port (int): The Redis server port.
            db (int): The Redis database number.
        """
        if redis_client is None:
            redis_client = redis.StrictRedis(
                host=host,
                port=port,
                db=db,
                decode_responses=True,
            )
        self.redis = redis_client

    def get(self, cache_key):
        """
        Returns the deserialized value, or None when the key is absent or expired.
        """
        raw = self.redis.get(cache_key)
        if not raw:
            return None
        return json.loads(raw)

    def set(self, cache_key, value, ttl_seconds):
        """
        Serializes the value to JSON and stores it with an expiry.
        """
        self.redis.setex(cache_key, ttl_seconds, json.dumps(value))
        logger.debug(f"Cached key '{cache_key}' for {ttl_seconds}s")

    def delete(self, *cache_keys):
        if not cache_keys:
            return 0
        return self.redis.delete(*cache_keys)

    def close(self):
        self.redis.close()
