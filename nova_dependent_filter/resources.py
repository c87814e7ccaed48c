"""Panel resources and lenses, and the registry holding them."""
from __future__ import annotations

from importlib import import_module
from typing import Dict, Iterable, List, Optional, Type
import logging
import re

from django.http import Http404
from django.utils.text import slugify

log = logging.getLogger(__name__)


def _kebab(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "-", name).lower()


class Lens:
    """An alternate view over a resource with its own filter set."""

    name: str = ""
    uri: Optional[str] = None

    def uri_key(self) -> str:
        return self.uri or slugify(self.name or type(self).__name__)

    def filters(self, request) -> list:
        return []


class Resource:
    """A model exposed to the panel for listing and filtering.

    ``uri_key()`` defaults to the slugified plural verbose name of
    ``model``, or the kebab-cased class name plus ``s`` without one.
    """

    model = None
    uri: Optional[str] = None

    @classmethod
    def uri_key(cls) -> str:
        if cls.uri:
            return cls.uri
        if cls.model is not None:
            return slugify(str(cls.model._meta.verbose_name_plural))
        return _kebab(cls.__name__) + "s"

    def filters(self, request) -> list:
        return []

    def lenses(self, request) -> List[Lens]:
        return []

    def get_lens(self, request, key: str) -> Optional[Lens]:
        for lens in self.lenses(request):
            if lens.uri_key() == key:
                return lens
        return None


class ResourceRegistry:
    """Store resource classes by URI key.

    Duplicate keys raise ``ValueError``; anything that is not a
    :class:`Resource` subclass raises ``TypeError``.
    """

    def __init__(self):
        self._resources: Dict[str, Type[Resource]] = {}

    def register(self, resource_cls: Type[Resource]) -> Type[Resource]:
        if not (isinstance(resource_cls, type) and issubclass(resource_cls, Resource)):
            raise TypeError("resource_cls must subclass Resource")
        key = resource_cls.uri_key()
        if key in self._resources:
            raise ValueError(f"Resource '{key}' is already registered")
        self._resources[key] = resource_cls
        log.debug("Registered resource %s as %s", resource_cls.__name__, key)
        return resource_cls

    def unregister(self, key: str) -> None:
        self._resources.pop(key, None)

    def get(self, key: str) -> Optional[Type[Resource]]:
        return self._resources.get(key)

    def get_or_404(self, key: str) -> Resource:
        """Return an instance of the resource registered under ``key``."""

        resource_cls = self.get(key)
        if resource_cls is None:
            raise Http404(f"Resource '{key}' is not registered")
        return resource_cls()

    def all(self) -> Dict[str, Type[Resource]]:
        return dict(self._resources)

    def clear(self) -> None:
        self._resources.clear()


resources = ResourceRegistry()


def register(resource_cls: Type[Resource]) -> Type[Resource]:
    """Class decorator registering ``resource_cls`` in the global registry."""
    return resources.register(resource_cls)


def load_resources(entries: Iterable[str], registry: ResourceRegistry = resources) -> None:
    """Import resource entries given as ``"module"`` or ``"module:callable"``.

    A bare module is expected to register its resources on import; a
    callable receives the registry.
    """

    for entry in entries:
        try:
            module_path, callable_name = entry.split(":", 1)
        except ValueError:
            import_module(entry)
        else:
            module = import_module(module_path)
            registrar = getattr(module, callable_name)
            registrar(registry)


__all__ = [
    "Lens",
    "Resource",
    "ResourceRegistry",
    "resources",
    "register",
    "load_resources",
]
