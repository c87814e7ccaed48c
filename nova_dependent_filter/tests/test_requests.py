import base64
import json

from django.test import RequestFactory, SimpleTestCase

from nova_dependent_filter.http.requests import decode_filters, encode_filters


class DecodeFiltersTests(SimpleTestCase):
    def setUp(self):
        self.factory = RequestFactory()

    def test_encoded_list_payload(self):
        raw = encode_filters({"CountryFilter": "nl", "CityFilter": ""})
        request = self.factory.get("/", {"filters": raw})
        self.assertEqual(decode_filters(request), {"CountryFilter": "nl", "CityFilter": ""})

    def test_encoded_object_payload(self):
        raw = base64.b64encode(json.dumps({"CountryFilter": ["nl", "be"]}).encode()).decode()
        request = self.factory.get("/", {"filters": raw.rstrip("=")})
        self.assertEqual(decode_filters(request), {"CountryFilter": ["nl", "be"]})

    def test_prefixed_query_parameters(self):
        request = self.factory.get("/?filters.CountryFilter=nl&filters.CityFilter=1&filters.CityFilter=2&q=x")
        self.assertEqual(decode_filters(request), {"CountryFilter": "nl", "CityFilter": ["1", "2"]})

    def test_unknown_keys_are_dropped(self):
        request = self.factory.get("/?filters.CountryFilter=nl&filters.Other=1")
        self.assertEqual(decode_filters(request, keys=["CountryFilter"]), {"CountryFilter": "nl"})

    def test_malformed_payload_is_ignored(self):
        request = self.factory.get("/", {"filters": "not-base64-json"})
        with self.assertLogs("nova_dependent_filter.http.requests", level="WARNING"):
            self.assertEqual(decode_filters(request), {})

    def test_payload_with_wrong_shape_is_ignored(self):
        raw = base64.b64encode(json.dumps([1, 2]).encode()).decode()
        request = self.factory.get("/", {"filters": raw})
        with self.assertLogs("nova_dependent_filter.http.requests", level="WARNING"):
            self.assertEqual(decode_filters(request), {})

    def test_url_safe_payload(self):
        payload = json.dumps([{"class": "CityFilter", "value": "?>?>?>"}]).encode()
        raw = base64.urlsafe_b64encode(payload).decode()
        self.assertTrue("-" in raw or "_" in raw)
        request = self.factory.get("/", {"filters": raw})
        self.assertEqual(decode_filters(request), {"CityFilter": "?>?>?>"})
