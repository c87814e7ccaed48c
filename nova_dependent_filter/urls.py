from django.urls import path

from nova_dependent_filter.assets import script_view
from nova_dependent_filter.routing import router

urlpatterns = router.urlpatterns() + [
    path("nova-api/scripts/<str:name>", script_view, name="nova.scripts"),
]
