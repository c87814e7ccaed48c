from __future__ import annotations

from typing import Any, Dict, List
import logging

from django.http import Http404, JsonResponse

from nova_dependent_filter.conf import settings
from nova_dependent_filter.filters import has_value
from nova_dependent_filter.http.requests import decode_filters

log = logging.getLogger(__name__)


class FilterOptionsController:
    """Shared option resolution for resource and lens filters.

    ``?filter=<key>`` returns the option list of one filter; otherwise all
    filters are returned serialized with their current options. ``?q=``
    narrows options by label.
    """

    def current_values(self, request, filters) -> Dict[str, Any]:
        values = {f.key(): f.default() for f in filters if has_value(f.default())}
        values.update(decode_filters(request, keys=[f.key() for f in filters]))
        return values

    def resolve_options(self, request, flt, values, query: str = "") -> List[Dict[str, Any]]:
        try:
            options = flt.resolve_options(request, values)
        except Exception:
            log.exception("Could not resolve options for filter %s", flt.key())
            options = []
        if query:
            q_lower = query.lower()
            options = [o for o in options if q_lower in o["label"].lower()]
        return options[: settings.NOVA_DEPENDENT_FILTER_MAX_OPTIONS]

    def respond(self, request, filters) -> JsonResponse:
        values = self.current_values(request, filters)
        query = request.GET.get("q", "")
        wanted = request.GET.get("filter")
        if wanted:
            flt = next((f for f in filters if f.key() == wanted), None)
            if flt is None:
                raise Http404(f"Filter '{wanted}' is not available")
            return JsonResponse(self.resolve_options(request, flt, values, query), safe=False)
        payload = [
            f.serialize(request, values, self.resolve_options(request, f, values, query))
            for f in filters
        ]
        return JsonResponse(payload, safe=False)
