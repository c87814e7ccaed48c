from django.http import Http404

from nova_dependent_filter.resources import resources

from .base import FilterOptionsController


class LensFilterController(FilterOptionsController):
    """Filter options for a lens of a resource."""

    def options(self, request, resource, lens):
        instance = resources.get_or_404(resource)
        lens_obj = instance.get_lens(request, lens)
        if lens_obj is None:
            raise Http404(f"Lens '{lens}' is not defined on resource '{resource}'")
        return self.respond(request, list(lens_obj.filters(request)))
