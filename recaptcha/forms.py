from django import forms

from .widgets import ReCaptchaWidget


class ReCaptchaFormMixin:
    """Binds every reCAPTCHA widget of the form to ``request``."""

    def __init__(self, *args, request=None, **kwargs):
        super().__init__(*args, **kwargs)
        if request is not None:
            for field in self.fields.values():
                if isinstance(field.widget, ReCaptchaWidget):
                    field.widget.bind_request(request)


class ContactForm(ReCaptchaFormMixin, forms.Form):
    email = forms.EmailField()
    message = forms.CharField(widget=forms.Textarea)
    captcha = forms.CharField(
        label="",
        required=False,
        widget=ReCaptchaWidget(version="v2-invisible", text="Send", callback="onContactSubmit"),
    )
