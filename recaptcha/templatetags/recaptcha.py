from django import template

from recaptcha.conf import VERSION_V2, VERSION_V2_INVISIBLE, VERSION_V3, get_config, get_settings
from recaptcha.generator import ViewCounter
from recaptcha.variants import render_config

register = template.Library()


def _request(context):
    # RequestContext keeps the request even when {% include ... only %}
    # drops the "request" variable.
    return getattr(context, "request", None) or context.get("request")


def render_state(context) -> dict:
    """Per-render mapping that holds the v3 id counter.

    One request renders one page, so the state hangs off the request. A
    template rendered without a request keeps it in the root of the
    Context's render_context, which is shared by every template of that
    render, included ones too.
    """
    request = _request(context)
    if request is None:
        return context.render_context.dicts[0]
    return ViewCounter.for_request(request).state


def _nonce(context, nonce):
    if nonce is not None:
        return nonce
    return getattr(_request(context), "csp_nonce", None)


def _render(context, version, options):
    options["nonce"] = _nonce(context, options.get("nonce"))
    if version is not None:
        options["version"] = version
    config = get_config(**options)
    return render_config(config, render_state(context))


@register.simple_tag(takes_context=True)
def recaptcha(context, **options):
    """Render the widget for ``RECAPTCHA["VERSION"]`` or ``version=...``."""
    return _render(context, None, options)


@register.simple_tag(takes_context=True)
def recaptcha_v2(context, **options):
    return _render(context, VERSION_V2, options)


@register.simple_tag(takes_context=True)
def recaptcha_v2_invisible(context, **options):
    return _render(context, VERSION_V2_INVISIBLE, options)


@register.simple_tag(takes_context=True)
def recaptcha_v3(context, **options):
    return _render(context, VERSION_V3, options)


@register.simple_tag
def recaptcha_site_key() -> str:
    return get_settings()["SITE_KEY"]
