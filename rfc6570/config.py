"""Configuration classes for rfc6570 components."""

from dataclasses import dataclass


@dataclass
class TemplateCacheConfig:
    """Configuration for the parsed-template cache used by ``rfc6570.api``."""

    # Maximum number of parsed templates kept; least recently used go first
    maxsize: int = 256

    # Set to False to parse on every call
    enabled: bool = True

    def effective_maxsize(self) -> int:
        """Return the usable cache size (0 when caching is off)."""
        if not self.enabled:
            return 0
        return max(0, self.maxsize)


# Global configuration instance
TEMPLATE_CACHE_CONFIG = TemplateCacheConfig()
