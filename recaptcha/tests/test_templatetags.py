"""Tests for recaptcha/templatetags/recaptcha.py."""
from django.core.exceptions import ImproperlyConfigured
from django.template import Context, RequestContext, Template
from django.test import RequestFactory, SimpleTestCase
from django.test.utils import override_settings


def render(source, context=None, request=None):
    template = Template("{% load recaptcha %}" + source)
    if request is not None:
        return template.render(RequestContext(request, context or {}))
    return template.render(Context(context or {}))


@override_settings(RECAPTCHA={"SITE_KEY": "SK", "LANGUAGE": "en"})
class RecaptchaTagTests(SimpleTestCase):
    def setUp(self):
        self.factory = RequestFactory()

    def test_default_version_is_checkbox(self):
        html = render("{% recaptcha %}")
        self.assertIn('<div class="g-recaptcha" data-sitekey="SK"></div>', html)
        self.assertIn('<script src="https://www.google.com/recaptcha/api.js?hl=en" defer></script>', html)

    @override_settings(RECAPTCHA={"SITE_KEY": "SK", "VERSION": "v3", "ACTION": "home"})
    def test_configured_version(self):
        html = render("{% recaptcha %}")
        self.assertIn("action: 'home'", html)

    def test_version_argument(self):
        html = render('{% recaptcha version="v2-invisible" text="Go" %}')
        self.assertIn(">Go</button>", html)

    def test_unknown_version_raises(self):
        with self.assertRaises(ImproperlyConfigured):
            render('{% recaptcha version="v9" %}')

    def test_output_not_escaped_by_autoescape(self):
        html = render("{% recaptcha_v2 %}")
        self.assertNotIn("&lt;div", html)

    def test_arguments_from_context(self):
        html = render("{% recaptcha_v2 theme=theme %}", {"theme": "dark"})
        self.assertIn('data-theme="dark"', html)

    def test_v3_ids_increase_within_render(self):
        html = render("{% recaptcha_v3 %}{% recaptcha_v2 %}{% recaptcha_v3 %}{% recaptcha_v3 %}")
        for n in (1, 2, 3):
            self.assertIn(f'id="g-recaptcha-response-{n}"', html)
            self.assertIn(f"function updateReCaptcha{n}()", html)
        self.assertNotIn("g-recaptcha-response-4", html)

    def test_separate_renders_start_at_one(self):
        first = render("{% recaptcha_v3 %}")
        second = render("{% recaptcha_v3 %}")
        self.assertIn("g-recaptcha-response-1", first)
        self.assertIn("g-recaptcha-response-1", second)

    def test_counter_shared_across_templates_of_one_request(self):
        request = self.factory.get("/")
        first = render("{% recaptcha_v3 %}", request=request)
        second = render("{% recaptcha_v3 %}", request=request)
        self.assertIn("g-recaptcha-response-1", first)
        self.assertIn("g-recaptcha-response-2", second)

    def test_requests_have_independent_counters(self):
        html_a = render("{% recaptcha_v3 %}", request=self.factory.get("/"))
        html_b = render("{% recaptcha_v3 %}", request=self.factory.get("/"))
        self.assertIn("g-recaptcha-response-1", html_a)
        self.assertIn("g-recaptcha-response-1", html_b)

    def test_nonce_taken_from_request(self):
        request = self.factory.get("/")
        request.csp_nonce = "req-nonce"
        html = render("{% recaptcha_v3 %}", request=request)
        self.assertEqual(html.count('nonce="req-nonce"'), 2)

    def test_explicit_nonce_wins(self):
        request = self.factory.get("/")
        request.csp_nonce = "req-nonce"
        html = render('{% recaptcha_v2 nonce="explicit" auto_theme=True %}', request=request)
        self.assertEqual(html.count('nonce="explicit"'), 2)
        self.assertNotIn("req-nonce", html)

    def test_invisible_never_carries_nonce(self):
        request = self.factory.get("/")
        request.csp_nonce = "req-nonce"
        html = render("{% recaptcha_v2_invisible %}", request=request)
        self.assertNotIn("nonce", html)

    def test_isolated_include_keeps_request_counter_and_nonce(self):
        request = self.factory.get("/")
        request.csp_nonce = "N"
        child = Template("{% load recaptcha %}{% recaptcha_v3 %}")
        html = render(
            "{% recaptcha_v3 %}{% include child only %}", {"child": child}, request=request
        )
        self.assertEqual(html.count('id="g-recaptcha-response-1"'), 1)
        self.assertEqual(html.count('id="g-recaptcha-response-2"'), 1)
        self.assertIn("function updateReCaptcha2()", html)
        self.assertEqual(html.count('nonce="N"'), 4)

    def test_isolated_include_without_request_keeps_counter(self):
        child = Template("{% load recaptcha %}{% recaptcha_v3 %}")
        html = render("{% recaptcha_v3 %}{% include child only %}", {"child": child})
        self.assertEqual(html.count('id="g-recaptcha-response-1"'), 1)
        self.assertEqual(html.count('id="g-recaptcha-response-2"'), 1)

    def test_site_key_tag(self):
        self.assertEqual(render("{% recaptcha_site_key %}"), "SK")
