from nova_dependent_filter.resources import resources

from .base import FilterOptionsController


class FilterController(FilterOptionsController):
    """Filter options for a resource index."""

    def options(self, request, resource):
        instance = resources.get_or_404(resource)
        return self.respond(request, list(instance.filters(request)))
