"""Panel settings with package defaults."""
from __future__ import annotations

from typing import Any, Dict

from django.conf import settings as django_settings

__all__ = ["settings", "config", "NovaSettings"]

DEFAULTS: Dict[str, Any] = {
    "NOVA": {"domain": None},
    "NOVA_RESOURCES": [],
    "NOVA_MIDDLEWARE_GROUPS": {
        "nova": [
            "nova_dependent_filter.middleware.serve_nova",
            "nova_dependent_filter.middleware.authenticate",
            "nova_dependent_filter.middleware.authorize",
        ],
    },
    "NOVA_AUTHORIZE": None,
    "NOVA_DEPENDENT_FILTER_MAX_OPTIONS": 200,
}


class NovaSettings:
    """Read Django settings, falling back to ``DEFAULTS`` for panel keys.

    Values are looked up on every access so ``override_settings`` applies.
    """

    def __init__(self, defaults: Dict[str, Any]):
        self._defaults = defaults

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        if hasattr(django_settings, name):
            return getattr(django_settings, name)
        try:
            return self._defaults[name]
        except KeyError:
            raise AttributeError(f"Setting '{name}' is not defined") from None


settings = NovaSettings(DEFAULTS)

_MISSING = object()


def config(key: str, default: Any = None) -> Any:
    """Read a dotted configuration key such as ``"nova.domain"``.

    The first segment names a Django setting (upper-cased); remaining
    segments index into nested dicts. Missing segments return ``default``.
    """

    head, *rest = key.split(".")
    value = getattr(settings, head.upper(), _MISSING)
    for part in rest:
        if not isinstance(value, dict) or part not in value:
            return default
        value = value[part]
    if value is _MISSING:
        return default
    return value
