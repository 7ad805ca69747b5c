"""Caller-owned memo cache for layouts, keyed by a content fingerprint."""
import hashlib
import json
import logging
from collections import OrderedDict
from typing import Any, Callable

_logger = logging.getLogger(__name__)


def _normalize(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {str(k): _normalize(obj[k]) for k in sorted(obj.keys(), key=str)}
    if isinstance(obj, (list, tuple)):
        return [_normalize(v) for v in obj]
    return obj


def fingerprint(*parts: Any) -> str:
    """SHA-1 of the canonical JSON of parts. Equal content gives an equal key."""
    payload = _normalize(list(parts))
    raw = json.dumps(payload, sort_keys=True, ensure_ascii=True, separators=(",", ":"), default=str).encode("utf-8")
    return hashlib.sha1(raw).hexdigest()


class LayoutCache:
    """Least-recently-used store of computed results."""

    def __init__(self, maxsize: int = 64):
        self.maxsize = max(1, maxsize)
        self._entries: OrderedDict[str, Any] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def get_or_compute(self, key: str, compute: Callable[[], Any]) -> Any:
        if key in self._entries:
            self._entries.move_to_end(key)
            self.hits += 1
            _logger.debug("cache hit %s", key[:12])
            return self._entries[key]
        self.misses += 1
        value = compute()
        self._entries[key] = value
        if len(self._entries) > self.maxsize:
            self._entries.popitem(last=False)
        return value

    def clear(self) -> None:
        self._entries.clear()
