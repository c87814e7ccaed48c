"""Route groups over Django URL patterns.

Routes are declared against a :class:`Router` inside a group that supplies
the controller namespace, an optional host restriction, a route-name
prefix, a path prefix and named middleware. ``Router.urlpatterns()``
turns the declared routes into Django ``URLPattern`` objects.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from functools import wraps
from importlib import import_module
from typing import Any, Callable, Dict, List, Optional, Tuple
import logging
import re

from django.core.exceptions import ImproperlyConfigured
from django.http import Http404
from django.urls import path as django_path
from django.utils.module_loading import import_string
from django.views.decorators.http import require_http_methods

from nova_dependent_filter.middleware import apply_middleware

log = logging.getLogger(__name__)

_PARAM_RE = re.compile(r"\{(\w+)\}")


def _join_path(*parts: str) -> str:
    return "/".join(p.strip("/") for p in parts if p and p.strip("/"))


@dataclass(frozen=True)
class RouteGroup:
    """Attributes shared by every route declared inside a group."""

    namespace: str = ""
    domain: Optional[str] = None
    as_: str = ""
    prefix: str = ""
    middleware: Tuple[str, ...] = ()

    @classmethod
    def from_options(cls, options: Dict[str, Any]) -> "RouteGroup":
        """Build a group from a mapping using the ``as``/``prefix`` keys."""

        middleware = options.get("middleware") or ()
        if isinstance(middleware, str):
            middleware = (middleware,)
        return cls(
            namespace=options.get("namespace") or "",
            domain=options.get("domain") or None,
            as_=options.get("as") or "",
            prefix=options.get("prefix") or "",
            middleware=tuple(middleware),
        )

    def merge(self, inner: "RouteGroup") -> "RouteGroup":
        namespace = inner.namespace
        if self.namespace and namespace and not namespace.startswith(self.namespace):
            namespace = f"{self.namespace}.{namespace}"
        return RouteGroup(
            namespace=namespace or self.namespace,
            domain=inner.domain or self.domain,
            as_=self.as_ + inner.as_,
            prefix=_join_path(self.prefix, inner.prefix),
            middleware=self.middleware + tuple(m for m in inner.middleware if m not in self.middleware),
        )


@dataclass
class Route:
    methods: Tuple[str, ...]
    uri: str
    action: str
    group: RouteGroup = field(default_factory=RouteGroup)
    route_name: Optional[str] = None

    def name(self, value: str) -> "Route":
        self.route_name = value
        return self

    @property
    def full_name(self) -> Optional[str]:
        if not self.route_name:
            return None
        return self.group.as_ + self.route_name

    @property
    def path(self) -> str:
        return _join_path(self.group.prefix, self.uri)

    @property
    def domain(self) -> Optional[str]:
        return self.group.domain

    @property
    def middleware(self) -> Tuple[str, ...]:
        return self.group.middleware

    @property
    def parameters(self) -> List[str]:
        return _PARAM_RE.findall(self.uri)

    def controller_class(self):
        try:
            controller, method = self.action.split("@", 1)
        except ValueError:
            raise ImproperlyConfigured(
                f"Route action '{self.action}' must look like 'Controller@method'"
            )
        dotted = f"{self.group.namespace}.{controller}" if self.group.namespace else controller
        try:
            cls = import_string(dotted)
        except ImportError as e:
            raise ImproperlyConfigured(f"Controller '{dotted}' could not be imported") from e
        if not callable(getattr(cls, method, None)):
            raise ImproperlyConfigured(f"Controller '{dotted}' has no action '{method}'")
        return cls, method

    def view(self):
        """Return the Django view dispatching to the controller action."""

        cls, method = self.controller_class()

        def action(request, *args, **kwargs):
            return getattr(cls(), method)(request, *args, **kwargs)

        view = apply_middleware(action, self.middleware)
        view = require_http_methods(list(self.methods))(view)
        if self.domain:
            view = restrict_to_domain(self.domain)(view)
        view.route = self
        return view

    def url_pattern(self):
        pattern = _PARAM_RE.sub(r"<str:\1>", self.path)
        return django_path(pattern, self.view(), name=self.full_name)


def restrict_to_domain(domain: str):
    """Only match requests whose host is ``domain``; others get a 404."""

    expected = domain.lower()

    def decorator(view):
        @wraps(view)
        def wrapper(request, *args, **kwargs):
            host = request.get_host().rsplit(":", 1)[0].lower()
            if host != expected:
                raise Http404(f"No route for host '{host}'")
            return view(request, *args, **kwargs)

        return wrapper

    return decorator


class Router:
    """Collect routes declared inside (possibly nested) groups."""

    def __init__(self):
        self._routes: List[Route] = []
        self._groups: List[RouteGroup] = []

    def group(self, options, routes: Callable[[], Any]) -> None:
        group = options if isinstance(options, RouteGroup) else RouteGroup.from_options(options)
        if self._groups:
            group = self._groups[-1].merge(group)
        self._groups.append(group)
        try:
            routes()
        finally:
            self._groups.pop()

    def add(self, methods, uri: str, action: str) -> Route:
        group = self._groups[-1] if self._groups else RouteGroup()
        route = Route(methods=tuple(methods), uri=uri, action=action, group=replace(group))
        self._routes.append(route)
        log.debug("Registered route %s %s -> %s", "|".join(route.methods), route.path, action)
        return route

    def get(self, uri: str, action: str) -> Route:
        return self.add(("GET", "HEAD"), uri, action)

    def load(self, entry: str) -> None:
        """Run a route file given as ``"module"`` or ``"module:callable"``.

        A bare module must expose ``register(router)``.
        """

        module_path, _, callable_name = entry.partition(":")
        module = import_module(module_path)
        registrar = getattr(module, callable_name or "register")
        registrar(self)

    @property
    def routes(self) -> List[Route]:
        return list(self._routes)

    def get_by_name(self, name: str) -> Optional[Route]:
        for route in self._routes:
            if name in (route.route_name, route.full_name):
                return route
        return None

    def urlpatterns(self) -> list:
        return [route.url_pattern() for route in self._routes]

    def clear(self) -> None:
        self._routes.clear()


router = Router()

__all__ = ["Route", "RouteGroup", "Router", "restrict_to_domain", "router"]
