# Cache key derivation for catalog lookups


class CacheKeyGenerator:
    @staticmethod
    def for_genre(genre):
        """Genre lookups share one entry regardless of case or surrounding whitespace."""
        return (genre or "").strip().lower()
