"""Script assets the panel front end loads on every page."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Union
import logging

from django.http import FileResponse, Http404

from nova_dependent_filter.middleware import serve_nova

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Script:
    name: str
    path: Path


class ScriptRegistry:
    """Store script assets by logical name.

    Registering a name twice replaces the earlier path, so listeners that
    re-register on every request stay idempotent.
    """

    def __init__(self):
        self._scripts: Dict[str, Script] = {}

    def script(self, name: str, path: Union[str, Path]) -> Script:
        entry = Script(name=name, path=Path(path))
        if self._scripts.get(name) != entry:
            log.debug("Registered script %s -> %s", name, entry.path)
        self._scripts[name] = entry
        return entry

    def get(self, name: str):
        return self._scripts.get(name)

    def all(self) -> List[Script]:
        return list(self._scripts.values())

    def clear(self) -> None:
        self._scripts.clear()

    def __contains__(self, name: str) -> bool:
        return name in self._scripts

    def __len__(self) -> int:
        return len(self._scripts)


scripts = ScriptRegistry()


@serve_nova
def script_view(request, name):
    """Serve the file registered under ``name``."""

    entry = scripts.get(name)
    if entry is None or not entry.path.is_file():
        raise Http404(f"Script '{name}' is not registered")
    return FileResponse(entry.path.open("rb"), content_type="application/javascript")


__all__ = ["Script", "ScriptRegistry", "scripts", "script_view"]
