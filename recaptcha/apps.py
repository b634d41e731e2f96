from django.apps import AppConfig


class RecaptchaConfig(AppConfig):
    name = "recaptcha"
    verbose_name = "reCAPTCHA"

    def ready(self):
        from .variants import register_builtin_variants
        register_builtin_variants()
