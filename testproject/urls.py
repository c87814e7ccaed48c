from django.urls import include, path

urlpatterns = [
    path("", include("nova_dependent_filter.urls")),
]
