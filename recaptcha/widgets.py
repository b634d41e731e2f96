from django import forms

from .conf import get_config
from .generator import ViewCounter
from .variants import render_config

RESPONSE_FIELD = "g-recaptcha-response"


class ReCaptchaWidget(forms.Widget):
    """Form widget that renders the configured reCAPTCHA variant.

    Keyword arguments other than ``attrs`` override the ``RECAPTCHA``
    settings for this widget (``version="v3"``, ``theme="dark"``, ...).
    Forms deep-copy their widgets, so an unbound widget starts its own v3
    id counter per form. Call ``bind_request()`` (``ReCaptchaFormMixin``
    does it) to share the per-request counter the template tags use.
    """

    def __init__(self, attrs=None, **options):
        self.options = options
        self.counter = ViewCounter()
        super().__init__(attrs)

    def __deepcopy__(self, memo):
        obj = super().__deepcopy__(memo)
        obj.options = dict(self.options)
        obj.counter = ViewCounter()
        return obj

    def bind_state(self, state):
        self.counter = ViewCounter(state)

    def bind_request(self, request):
        self.counter = ViewCounter.for_request(request)
        if "nonce" not in self.options:
            nonce = getattr(request, "csp_nonce", None)
            if nonce is not None:
                self.options["nonce"] = nonce

    def render(self, name, value, attrs=None, renderer=None):
        config = get_config(**self.options)
        return render_config(config, self.counter.state)

    def value_from_datadict(self, data, files, name):
        return data.get(RESPONSE_FIELD)

    def value_omitted_from_data(self, data, files, name):
        return RESPONSE_FIELD not in data
