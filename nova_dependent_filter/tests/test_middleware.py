
from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser
from django.core.exceptions import ImproperlyConfigured
from django.http import HttpResponse
from django.test import RequestFactory, SimpleTestCase, TestCase, override_settings

from nova_dependent_filter.middleware import apply_middleware, resolve_middleware, serve_nova
from nova_dependent_filter.signals import serving_nova


def ok_view(request, *args, **kwargs):
    return HttpResponse("ok")


def superusers_only(request):
    return request.user.is_superuser


class ResolveMiddlewareTests(SimpleTestCase):
    def test_nova_group_resolves_in_order(self):
        names = [m.__name__ for m in resolve_middleware(["nova"])]
        self.assertEqual(names, ["serve_nova", "authenticate", "authorize"])

    def test_unknown_name_raises(self):
        with self.assertRaises(ImproperlyConfigured):
            resolve_middleware(["web"])

    @override_settings(NOVA_MIDDLEWARE_GROUPS={"plain": []})
    def test_groups_come_from_settings(self):
        self.assertEqual(resolve_middleware(["plain"]), [])
        with self.assertRaises(ImproperlyConfigured):
            resolve_middleware(["nova"])

    def test_serve_nova_sends_signal(self):
        request = RequestFactory().get("/")
        seen = []

        def receiver(sender, **kwargs):
            seen.append(kwargs["request"])

        serving_nova.connect(receiver, weak=False, dispatch_uid="test-serve-nova")
        self.addCleanup(serving_nova.disconnect, dispatch_uid="test-serve-nova")

        response = serve_nova(ok_view)(request)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(seen, [request])


class NovaGroupTests(TestCase):
    def setUp(self):
        self.factory = RequestFactory()
        self.view = apply_middleware(ok_view, ["nova"])
        UserModel = get_user_model()
        self.staff = UserModel.objects.create_user(username="staff", password="x", is_staff=True)
        self.member = UserModel.objects.create_user(username="member", password="x")

    def _request(self, user):
        request = self.factory.get("/")
        request.user = user
        return request

    def test_anonymous_is_unauthenticated(self):
        response = self.view(self._request(AnonymousUser()))
        self.assertEqual(response.status_code, 401)
        self.assertJSONEqual(response.content, {"message": "Unauthenticated."})

    def test_non_staff_is_unauthorized(self):
        response = self.view(self._request(self.member))
        self.assertEqual(response.status_code, 403)

    def test_staff_passes(self):
        response = self.view(self._request(self.staff))
        self.assertEqual(response.status_code, 200)

    def test_inactive_staff_is_unauthorized(self):
        self.staff.is_active = False
        response = self.view(self._request(self.staff))
        self.assertEqual(response.status_code, 403)

    @override_settings(NOVA_AUTHORIZE="nova_dependent_filter.tests.test_middleware.superusers_only")
    def test_custom_gate(self):
        self.assertEqual(self.view(self._request(self.staff)).status_code, 403)
        admin = get_user_model().objects.create_superuser(username="root", password="x")
        self.assertEqual(self.view(self._request(admin)).status_code, 200)
