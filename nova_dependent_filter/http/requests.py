"""Decoding of the current filter selection sent by the front end."""
from __future__ import annotations

from typing import Any, Dict, Iterable, Optional
import base64
import json
import logging

log = logging.getLogger(__name__)

PREFIX = "filters."


def _decode_payload(raw: str) -> Any:
    # Browsers may turn unescaped "+" into spaces in query strings; URL-safe
    # encoders use "-" and "_" in place of "+" and "/".
    raw = raw.strip().replace(" ", "+").replace("-", "+").replace("_", "/")
    raw += "=" * (-len(raw) % 4)
    return json.loads(base64.b64decode(raw, validate=True).decode("utf-8"))


def _from_payload(payload: Any) -> Optional[Dict[str, Any]]:
    if isinstance(payload, dict):
        return dict(payload)
    if isinstance(payload, list):
        values: Dict[str, Any] = {}
        for item in payload:
            if not isinstance(item, dict) or "class" not in item:
                return None
            values[str(item["class"])] = item.get("value")
        return values
    return None


def decode_filters(request, keys: Optional[Iterable[str]] = None) -> Dict[str, Any]:
    """Return ``{filter_key: value}`` from the request query string.

    ``filters`` holds base64-encoded JSON, either a list of
    ``{"class": key, "value": value}`` objects or a plain object. Without
    it, ``filters.<key>`` parameters are read; repeated parameters yield
    lists. When ``keys`` is given, unknown keys are dropped.
    """

    qd = request.GET
    raw = qd.get("filters")
    values: Dict[str, Any] = {}
    if raw:
        try:
            decoded = _from_payload(_decode_payload(raw))
        except ValueError:
            decoded = None
        if decoded is None:
            log.warning("Ignoring malformed filters payload: %r", raw[:200])
        else:
            values = decoded
    else:
        for name in qd.keys():
            if not name.startswith(PREFIX):
                continue
            vals = qd.getlist(name)
            values[name[len(PREFIX):]] = vals if len(vals) > 1 else vals[0]
    if keys is not None:
        allowed = set(keys)
        values = {k: v for k, v in values.items() if k in allowed}
    return values


def encode_filters(values: Dict[str, Any]) -> str:
    """Encode ``values`` the way the front end sends them."""

    payload = [{"class": key, "value": value} for key, value in values.items()]
    return base64.b64encode(json.dumps(payload).encode("utf-8")).decode("ascii")


__all__ = ["decode_filters", "encode_filters"]
