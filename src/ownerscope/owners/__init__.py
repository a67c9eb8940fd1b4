"""Owner validation seam."""

from ownerscope.owners.cache import CachedValidator, OwnerCache, OwnerStatus, OwnerValidator

__all__ = [
    "CachedValidator",
    "OwnerCache",
    "OwnerStatus",
    "OwnerValidator",
]
