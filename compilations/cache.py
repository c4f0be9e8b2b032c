"""Cache keys for compilation responses."""

from collections.abc import Iterable

from django.conf import settings
from django.core.cache import cache


def compilation_key(compilation_id: int | str) -> str:
    return f"compilations:{compilation_id}"


def cache_ttl() -> int:
    return getattr(settings, "COMPILATION_CACHE_TTL", 60)


def invalidate_compilations(compilation_ids: Iterable[int]) -> None:
    keys = [compilation_key(compilation_id) for compilation_id in compilation_ids]
    if keys:
        cache.delete_many(keys)
