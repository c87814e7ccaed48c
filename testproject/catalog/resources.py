from django.contrib.auth import get_user_model

from nova_dependent_filter.filters import DependentFilter, ModelFilter, SelectFilter
from nova_dependent_filter.resources import Lens, Resource, register

from .models import City, Country, Store


class CountryFilter(ModelFilter):
    model = Country
    value_field = "code"
    label_field = "name"
    ordering = ("name",)


class CityFilter(ModelFilter):
    model = City
    label_field = "name"
    lookups = {"CountryFilter": "country__code"}
    ordering = ("name",)


class StatusFilter(SelectFilter):
    name = "Status"

    def __init__(self):
        super().__init__(options={"Active": True, "Inactive": False})


def _store_options(request, filters):
    return Store.objects.filter(city_id=filters["CityFilter"]).values_list("pk", "name")


class ActiveStores(Lens):
    name = "Active Stores"

    def filters(self, request):
        return [CountryFilter(), CityFilter()]


@register
class StoreResource(Resource):
    model = Store

    def filters(self, request):
        return [
            CountryFilter(),
            CityFilter(),
            DependentFilter("Store", key="StoreFilter", options=_store_options).dependent_of(
                "CityFilter"
            ),
            StatusFilter(),
        ]

    def lenses(self, request):
        return [ActiveStores()]


class StaffFilter(SelectFilter):

    def options(self, request):
        return [(True, "Staff"), (False, "Regular")]


def _username_options(request, filters):
    is_staff = str(filters["StaffFilter"]).lower() in {"true", "1"}
    qs = get_user_model().objects.filter(is_staff=is_staff)
    return {user.get_username(): user.pk for user in qs.order_by("username")}


class ActiveUsers(Lens):
    name = "Active Users"

    def filters(self, request):
        return [
            StaffFilter(),
            DependentFilter("User", key="UserFilter", options=_username_options).dependent_of(
                "StaffFilter"
            ),
        ]


class BrokenFilter(DependentFilter):
    allow_partial = True

    def options(self, request, filters=None):
        raise RuntimeError("options backend unavailable")


@register
class UserResource(Resource):
    model = get_user_model()

    def filters(self, request):
        return [StaffFilter(), BrokenFilter()]

    def lenses(self, request):
        return [ActiveUsers()]
