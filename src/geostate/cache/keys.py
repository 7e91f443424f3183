"""Cache key builders for consistent key formatting."""

import json


class CacheKeys:
    """Cache key builders for consistent key formatting."""

    PREFIX = "geostate"

    @classmethod
    def resolution(cls, zip: str, city: str, country: str) -> str:
        """
        Key for a resolved subdivision code.

        The (zip, city, country) tuple is serialized as a JSON array, so field
        order, casing and whitespace are all significant and separators inside
        a field cannot collide with the next one.
        """
        serialized = json.dumps([zip, city, country], ensure_ascii=False)
        return f"{cls.PREFIX}:state:{serialized}"
