from __future__ import annotations

from typing import MutableMapping, Optional

from django.utils.html import format_html
from django.utils.safestring import SafeString, mark_safe

VIEW_COUNTER_KEY = "__recaptcha_generated_id"
REQUEST_STATE_ATTR = "_recaptcha_render_state"
REFRESH_INTERVAL_MS = 100000
DARK_MODE_SCRIPT = (
    "window.matchMedia('(prefers-color-scheme: dark)').matches"
    "&&document.querySelector('.g-recaptcha').setAttribute('data-theme','dark');"
)


def next_id(state: MutableMapping) -> int:
    """Allocate the next widget id for the render that owns ``state``."""
    current = state.get(VIEW_COUNTER_KEY)
    value = (current if isinstance(current, int) else 0) + 1
    state[VIEW_COUNTER_KEY] = value
    return value


class ViewCounter:
    """Id sequence for a single page render.

    Every v3 widget on a page needs its own hidden input and update
    function, so each page render owns one counter. Pass ``state`` to share
    the counter with other code holding the same mapping (a request, a
    template context).
    """

    def __init__(self, state: Optional[MutableMapping] = None):
        self.state = state if state is not None else {}

    @classmethod
    def for_request(cls, request) -> "ViewCounter":
        """Counter stored on ``request``; one request renders one page."""
        state = getattr(request, REQUEST_STATE_ATTR, None)
        if state is None:
            state = {}
            setattr(request, REQUEST_STATE_ATTR, state)
        return cls(state)

    def next_id(self) -> int:
        return next_id(self.state)

    @property
    def current(self) -> int:
        return self.state.get(VIEW_COUNTER_KEY, 0)


class Fragment:
    """Ordered markup chunks, joined into a safe string on output."""

    def __init__(self):
        self._chunks: list[str] = []

    def append_format(self, format_string: str, *args) -> "Fragment":
        self._chunks.append(format_html(format_string, *args))
        return self

    def append_html(self, html: str) -> "Fragment":
        self._chunks.append(html)
        return self

    def append_line(self) -> "Fragment":
        self._chunks.append("\n")
        return self

    def append_nonce(self, nonce: Optional[str], closing_tag: str) -> "Fragment":
        if nonce and nonce.strip():
            self.append_format(' nonce="{}"', nonce)
        return self.append_html(closing_tag)

    def __html__(self) -> SafeString:
        return mark_safe("".join(self._chunks))

    def __str__(self) -> str:
        return self.__html__()


def recaptcha_v2(
    base_url,
    site_key,
    size,
    theme,
    language,
    callback,
    error_callback,
    expired_callback,
    auto_theme: bool = False,
    nonce: Optional[str] = None,
) -> SafeString:
    content = Fragment()
    content.append_format('<div class="g-recaptcha" data-sitekey="{}"', site_key)

    if size:
        content.append_format(' data-size="{}"', size)
    if theme:
        content.append_format(' data-theme="{}"', theme)
    if callback:
        content.append_format(' data-callback="{}"', callback)
    if error_callback:
        content.append_format(' data-error-callback="{}"', error_callback)
    if expired_callback:
        content.append_format(' data-expired-callback="{}"', expired_callback)

    content.append_html("></div>")
    content.append_line()
    content.append_format('<script src="{}api.js?hl={}"', base_url, language or "")
    content.append_nonce(nonce, " defer></script>")

    if auto_theme:
        content.append_line().append_html("<script")
        content.append_nonce(nonce, ">")
        content.append_html(DARK_MODE_SCRIPT + "</script>")
        content.append_line()

    return content.__html__()


def recaptcha_v2_invisible(
    base_url,
    site_key,
    text,
    class_name,
    language,
    callback,
    error_callback,
    expired_callback,
    badge,
) -> SafeString:
    # No nonce here: the button variant never took one.
    content = Fragment()
    content.append_format('<button class="g-recaptcha {}"', class_name or "")
    content.append_format(' data-sitekey="{}"', site_key)

    if badge:
        content.append_format(' data-badge="{}"', badge)
    if callback:
        content.append_format(' data-callback="{}"', callback)
    if expired_callback:
        content.append_format(' data-expired-callback="{}"', expired_callback)
    if error_callback:
        content.append_format(' data-error-callback="{}"', error_callback)

    content.append_format(">{}</button>", text or "")
    content.append_line()
    content.append_format(
        '<script src="{}api.js?hl={}" defer></script>', base_url, language or ""
    )

    return content.__html__()


def recaptcha_v3(
    base_url,
    site_key,
    action,
    language,
    callback,
    id: int,
    nonce: Optional[str] = None,
) -> SafeString:
    """Render a score-based widget.

    ``id`` suffixes both the hidden input and the update function, so it
    must be unique within the page (see ``ViewCounter``). ``callback`` is
    accepted for signature parity with the other variants; v3 has no
    client-side callback attribute.
    """
    content = Fragment()
    content.append_html(
        f'<input id="g-recaptcha-response-{id}" name="g-recaptcha-response" type="hidden" value="" />'
    )
    content.append_format(
        '<script src="{}api.js?render={}&hl={}"', base_url, site_key, language or ""
    )
    content.append_nonce(nonce, "></script>")
    content.append_html("<script")
    content.append_nonce(nonce, ">")
    content.append_html(f"function updateReCaptcha{id}() {{")
    content.append_format(
        "grecaptcha.execute('{}', {{action: '{}'}}).then(function(token){{",
        site_key,
        action,
    )
    content.append_html(f"document.getElementById('g-recaptcha-response-{id}').value = token;")
    content.append_html("});")
    content.append_html("}")
    content.append_html(
        f"grecaptcha.ready(function() {{setInterval(updateReCaptcha{id}, {REFRESH_INTERVAL_MS}); "
        f"updateReCaptcha{id}()}});"
    )
    content.append_html("</script>")
    content.append_line()

    return content.__html__()
