"""Named middleware groups applied to panel routes.

A route group lists middleware by name (``"nova"``). Each name maps, via
``NOVA_MIDDLEWARE_GROUPS``, to a list of dotted paths of view decorators
that are applied outermost-first around the route's view.
"""
from __future__ import annotations

from functools import wraps
from typing import Callable, Iterable, List

from django.core.exceptions import ImproperlyConfigured
from django.http import JsonResponse
from django.utils.module_loading import import_string

from nova_dependent_filter.conf import settings
from nova_dependent_filter.signals import serving_nova


def serve_nova(view):
    """Fire ``serving_nova`` before handing the request to ``view``."""

    @wraps(view)
    def wrapper(request, *args, **kwargs):
        serving_nova.send(sender=None, request=request)
        return view(request, *args, **kwargs)

    return wrapper


def authenticate(view):
    @wraps(view)
    def wrapper(request, *args, **kwargs):
        user = getattr(request, "user", None)
        if user is None or not user.is_authenticated:
            return JsonResponse({"message": "Unauthenticated."}, status=401)
        return view(request, *args, **kwargs)

    return wrapper


def _default_gate(request) -> bool:
    return bool(request.user.is_active and request.user.is_staff)


def authorize(view):
    """Only let through users the ``NOVA_AUTHORIZE`` gate accepts.

    Without a configured gate, active staff users are accepted.
    """

    @wraps(view)
    def wrapper(request, *args, **kwargs):
        gate = settings.NOVA_AUTHORIZE
        if isinstance(gate, str):
            gate = import_string(gate)
        gate = gate or _default_gate
        if not gate(request):
            return JsonResponse({"message": "This action is unauthorized."}, status=403)
        return view(request, *args, **kwargs)

    return wrapper


def resolve_middleware(names: Iterable[str]) -> List[Callable]:
    """Return the decorators for ``names`` in application order."""

    groups = settings.NOVA_MIDDLEWARE_GROUPS
    decorators: List[Callable] = []
    for name in names:
        if name not in groups:
            raise ImproperlyConfigured(f"Unknown middleware '{name}'")
        for entry in groups[name]:
            decorators.append(import_string(entry) if isinstance(entry, str) else entry)
    return decorators


def apply_middleware(view, names: Iterable[str]):
    # The first listed decorator must run first, so wrap in reverse.
    for decorator in reversed(resolve_middleware(names)):
        view = decorator(view)
    return view


__all__ = [
    "serve_nova",
    "authenticate",
    "authorize",
    "resolve_middleware",
    "apply_middleware",
]
