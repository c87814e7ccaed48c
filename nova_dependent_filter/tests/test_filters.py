from django.test import SimpleTestCase, TestCase

from nova_dependent_filter.filters import DependentFilter, Filter, normalize_options
from testproject.catalog.models import City, Country
from testproject.catalog.resources import CityFilter, CountryFilter


class NormalizeOptionsTests(SimpleTestCase):
    def test_mapping_is_label_to_value(self):
        self.assertEqual(
            normalize_options({"Active": 1, "Inactive": 0}),
            [{"label": "Active", "value": 1}, {"label": "Inactive", "value": 0}],
        )

    def test_pairs_are_value_then_label(self):
        self.assertEqual(normalize_options([("nl", "Netherlands")]), [{"label": "Netherlands", "value": "nl"}])

    def test_dicts_pass_through_with_string_labels(self):
        self.assertEqual(normalize_options([{"label": 5, "value": 5}]), [{"label": "5", "value": 5}])

    def test_empty(self):
        self.assertEqual(normalize_options(None), [])


class FilterTests(SimpleTestCase):
    def test_key_and_name_default_to_class(self):
        class RegionFilter(Filter):
            pass

        flt = RegionFilter()
        self.assertEqual(flt.key(), "RegionFilter")
        self.assertEqual(flt.get_name(), "Region")

    def test_serialize(self):
        flt = Filter("Kind", key="kind", default="a", options={"A": "a"})
        self.assertEqual(
            flt.serialize(None, {}),
            {
                "class": "kind",
                "key": "kind",
                "name": "Kind",
                "component": "select-filter",
                "options": [{"label": "A", "value": "a"}],
                "currentValue": "a",
            },
        )


class DependentFilterTests(SimpleTestCase):
    def setUp(self):
        self.seen = []

        def options(request, filters):
            self.seen.append(filters)
            return {f"{filters['country']}-1": 1}

        self.filter = DependentFilter("City", key="city", options=options).dependent_of("country")

    def test_no_options_until_parents_are_selected(self):
        self.assertEqual(self.filter.resolve_options(None, {"country": ""}), [])
        self.assertEqual(self.seen, [])

    def test_options_receive_only_parent_values(self):
        options = self.filter.resolve_options(None, {"country": "nl", "other": "x"})
        self.assertEqual(options, [{"label": "nl-1", "value": 1}])
        self.assertEqual(self.seen, [{"country": "nl"}])

    def test_partial_parents_allowed(self):
        self.filter.allow_partial = True
        self.filter.dependent_of("country", "region")
        self.filter.resolve_options(None, {"country": "nl"})
        self.assertEqual(self.seen, [{"country": "nl", "region": None}])

    def test_serialize_includes_dependency_metadata(self):
        data = self.filter.hidden_when_empty().serialize(None, {})
        self.assertEqual(data["component"], "nova-dependent-filter")
        self.assertEqual(data["dependsOn"], ["country"])
        self.assertTrue(data["hideWhenEmpty"])
        self.assertEqual(data["options"], [])


class ModelFilterTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        nl = Country.objects.create(code="nl", name="Netherlands")
        be = Country.objects.create(code="be", name="Belgium")
        cls.amsterdam = City.objects.create(country=nl, name="Amsterdam")
        cls.utrecht = City.objects.create(country=nl, name="Utrecht")
        cls.ghent = City.objects.create(country=be, name="Ghent")

    def test_root_filter_lists_all_rows(self):
        options = CountryFilter().resolve_options(None, {})
        self.assertEqual([o["value"] for o in options], ["be", "nl"])

    def test_lookups_become_parents(self):
        self.assertEqual(CityFilter().depends_on, ("CountryFilter",))

    def test_options_narrow_by_parent(self):
        options = CityFilter().resolve_options(None, {"CountryFilter": "nl"})
        self.assertEqual(
            options,
            [
                {"label": "Amsterdam", "value": self.amsterdam.pk},
                {"label": "Utrecht", "value": self.utrecht.pk},
            ],
        )

    def test_multiple_parent_values(self):
        options = CityFilter().resolve_options(None, {"CountryFilter": ["nl", "be"]})
        self.assertEqual(len(options), 3)


class FilterSurfaceTests(SimpleTestCase):
    def test_filters_only_resolve_options(self):
        self.assertFalse(hasattr(Filter, "apply"))
        self.assertFalse(hasattr(CityFilter(), "field"))
