"""Boot-time wiring of the dependent filter plugin into the panel."""
from __future__ import annotations

from pathlib import Path
from typing import Optional
import logging

from nova_dependent_filter.assets import ScriptRegistry, scripts as default_scripts
from nova_dependent_filter.conf import config
from nova_dependent_filter.routing import RouteGroup, Router, router as default_router
from nova_dependent_filter.signals import serving_nova

log = logging.getLogger(__name__)

PACKAGE_ROOT = Path(__file__).resolve().parent


class ServiceProvider:
    """Base class for panel plugins.

    ``register()`` runs before any provider boots; ``boot()`` runs once
    all providers are registered.
    """

    def __init__(self, router: Optional[Router] = None, scripts: Optional[ScriptRegistry] = None):
        self.router = router if router is not None else default_router
        self.scripts = scripts if scripts is not None else default_scripts
        self.booted = False

    def register(self) -> None:
        pass

    def boot(self) -> None:
        pass

    def load_routes_from(self, entry: str) -> None:
        self.router.load(entry)


class FilterServiceProvider(ServiceProvider):
    script_name = "nova-dependent-filter"
    script_path = PACKAGE_ROOT / "dist" / "js" / "filter.js"
    routes = "nova_dependent_filter.routes.api:register"

    @property
    def dispatch_uid(self) -> str:
        return f"{self.script_name}:{id(self.scripts)}"

    def boot(self) -> None:
        if self.booted:
            return
        serving_nova.connect(self.register_script, weak=False, dispatch_uid=self.dispatch_uid)
        self.router.group(self.route_configuration(), lambda: self.load_routes_from(self.routes))
        self.booted = True
        log.debug("Booted %s", type(self).__name__)

    def register_script(self, sender=None, **kwargs) -> None:
        self.scripts.script(self.script_name, self.script_path)

    def route_configuration(self) -> RouteGroup:
        """Return the route group the plugin routes are mounted under."""

        return RouteGroup.from_options(
            {
                "namespace": "nova_dependent_filter.http.controllers",
                "domain": config("nova.domain", None),
                "as": "nova.api.",
                "prefix": "nova-api",
                "middleware": "nova",
            }
        )


__all__ = ["ServiceProvider", "FilterServiceProvider"]
