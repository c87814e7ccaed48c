"""Filter definitions consulted by the options endpoints.

Host applications subclass these in their resource modules. Options may
be given as a mapping of ``label -> value``, a sequence of
``(value, label)`` pairs, or a sequence of ``{"label", "value"}`` dicts;
they always leave the endpoint as ``[{"label": str, "value": value}]``.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

__all__ = [
    "Filter",
    "SelectFilter",
    "DependentFilter",
    "ModelFilter",
    "normalize_options",
    "has_value",
]


def has_value(value: Any) -> bool:
    return value not in (None, "", [], ())


def normalize_options(options: Any) -> List[Dict[str, Any]]:
    if not options:
        return []
    if isinstance(options, Mapping):
        return [{"label": str(label), "value": value} for label, value in options.items()]
    out: List[Dict[str, Any]] = []
    for item in options:
        if isinstance(item, Mapping):
            out.append({"label": str(item["label"]), "value": item["value"]})
        else:
            value, label = item
            out.append({"label": str(label), "value": value})
    return out


class Filter:
    """A select-style filter on a resource index or lens."""

    name: str = ""
    component: str = "select-filter"
    filter_key: Optional[str] = None

    def __init__(self, name: Optional[str] = None, *, key: Optional[str] = None,
                 default: Any = None, options: Any = None):
        if name is not None:
            self.name = name
        if key is not None:
            self.filter_key = key
        self._default = default
        self._options = options

    def key(self) -> str:
        return self.filter_key or type(self).__name__

    def get_name(self) -> str:
        if self.name:
            return self.name
        base = type(self).__name__
        if base.endswith("Filter") and base != "Filter":
            base = base[: -len("Filter")]
        return base

    def default(self) -> Any:
        return self._default

    def options(self, request) -> Any:
        if callable(self._options):
            return self._options(request)
        return self._options or []

    def resolve_options(self, request, filters: Dict[str, Any]) -> List[Dict[str, Any]]:
        return normalize_options(self.options(request))

    def serialize(self, request, filters: Dict[str, Any],
                  options: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
        if options is None:
            options = self.resolve_options(request, filters)
        return {
            "class": self.key(),
            "key": self.key(),
            "name": self.get_name(),
            "component": self.component,
            "options": options,
            "currentValue": filters.get(self.key(), self.default()),
        }


class SelectFilter(Filter):
    """Filter with a static option list."""


class DependentFilter(Filter):
    """Filter whose options depend on the selected values of sibling filters.

    ``depends_on`` lists the keys of the parent filters. Unless
    ``allow_partial`` is set, no options are offered until every parent
    has a value. ``options(request, filters)`` receives only the parent
    values.
    """

    component = "nova-dependent-filter"
    depends_on: Tuple[str, ...] = ()
    allow_partial = False
    hide_when_empty = False

    def __init__(self, name: Optional[str] = None, *, key: Optional[str] = None,
                 default: Any = None, options: Any = None,
                 depends_on: Optional[Iterable[str]] = None,
                 hide_when_empty: Optional[bool] = None):
        super().__init__(name, key=key, default=default, options=options)
        if depends_on is not None:
            self.depends_on = tuple(depends_on)
        if hide_when_empty is not None:
            self.hide_when_empty = hide_when_empty

    def dependent_of(self, *keys: str) -> "DependentFilter":
        self.depends_on = tuple(keys)
        return self

    def with_options(self, options: Any) -> "DependentFilter":
        self._options = options
        return self

    def with_default(self, value: Any) -> "DependentFilter":
        self._default = value
        return self

    def hidden_when_empty(self, flag: bool = True) -> "DependentFilter":
        self.hide_when_empty = flag
        return self

    def parent_values(self, filters: Dict[str, Any]) -> Dict[str, Any]:
        return {key: filters.get(key) for key in self.depends_on}

    def options(self, request, filters: Optional[Dict[str, Any]] = None) -> Any:
        if callable(self._options):
            return self._options(request, filters or {})
        return self._options or []

    def resolve_options(self, request, filters: Dict[str, Any]) -> List[Dict[str, Any]]:
        parents = self.parent_values(filters)
        if not self.allow_partial and not all(has_value(v) for v in parents.values()):
            return []
        return normalize_options(self.options(request, parents))

    def serialize(self, request, filters, options=None):
        data = super().serialize(request, filters, options)
        data["dependsOn"] = list(self.depends_on)
        data["hideWhenEmpty"] = self.hide_when_empty
        return data


class ModelFilter(DependentFilter):
    """Dependent filter whose options come from a model queryset.

    ``lookups`` maps parent filter keys to ORM lookups used to narrow the
    queryset, e.g. ``{"CountryFilter": "country"}``. Parents default to
    the ``lookups`` keys.
    """

    model = None
    value_field = "pk"
    label_field: Optional[str] = None
    lookups: Dict[str, str] = {}
    ordering: Tuple[str, ...] = ()

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if not self.depends_on and self.lookups:
            self.depends_on = tuple(self.lookups)

    def get_queryset(self, request):
        return self.model._default_manager.all()

    def options(self, request, filters=None):
        filters = filters or {}
        qs = self.get_queryset(request)
        for key, lookup in self.lookups.items():
            value = filters.get(key)
            if not has_value(value):
                continue
            if isinstance(value, (list, tuple)):
                qs = qs.filter(**{f"{lookup}__in": value})
            else:
                qs = qs.filter(**{lookup: value})
        if self.ordering:
            qs = qs.order_by(*self.ordering)
        if self.label_field is None:
            return [(getattr(obj, self.value_field), str(obj)) for obj in qs]
        return list(qs.values_list(self.value_field, self.label_field))
