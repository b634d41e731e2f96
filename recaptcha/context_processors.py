from .conf import base_url, get_settings


def recaptcha_settings(request):
    values = get_settings()
    return {
        "RECAPTCHA_SITE_KEY": values["SITE_KEY"],
        "RECAPTCHA_VERSION": values["VERSION"],
        "RECAPTCHA_BASE_URL": base_url(values["USE_RECAPTCHA_NET"]),
    }
