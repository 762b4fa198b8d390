# Abstract cache interface (Redis in production, in-memory doubles in tests)
class CacheStore:
    def get(self, cache_key):
        raise NotImplementedError
    def set(self, cache_key, value, ttl_seconds):
        raise NotImplementedError
    def delete(self, *cache_keys):
        raise NotImplementedError
