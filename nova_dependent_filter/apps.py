from django.apps import AppConfig

from nova_dependent_filter.conf import settings


class NovaDependentFilterConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "nova_dependent_filter"
    verbose_name = "Nova Dependent Filter"

    def ready(self):
        from .provider import FilterServiceProvider
        from .resources import load_resources

        # Resources first: routes resolve them by URI key at request time.
        load_resources(getattr(settings, "NOVA_RESOURCES", []))

        self.provider = FilterServiceProvider()
        self.provider.register()
        self.provider.boot()
