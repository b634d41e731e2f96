from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)

GOOGLE_BASE_URL = "https://www.google.com/recaptcha/"
RECAPTCHA_NET_BASE_URL = "https://www.recaptcha.net/recaptcha/"

VERSION_V2 = "v2"
VERSION_V2_INVISIBLE = "v2-invisible"
VERSION_V3 = "v3"

SIZES = {"compact", "normal", "invisible", ""}
THEMES = {"light", "dark", ""}
BADGES = {"bottomright", "bottomleft", "inline", ""}

DEFAULTS = {
    "SITE_KEY": "",
    "VERSION": VERSION_V2,
    "USE_RECAPTCHA_NET": False,
    "LANGUAGE": "",
    "SIZE": "",
    "THEME": "",
    "BADGE": "bottomright",
    "AUTO_THEME": False,
    "ACTION": "homepage",
    "BUTTON_TEXT": "Submit",
    "CLASS_NAME": "",
    "CALLBACK": "",
    "ERROR_CALLBACK": "",
    "EXPIRED_CALLBACK": "",
}


@dataclass(frozen=True)
class WidgetConfig:
    base_url: str
    site_key: str
    version: str = VERSION_V2
    size: str = ""
    theme: str = ""
    language: str = ""
    callback: str = ""
    error_callback: str = ""
    expired_callback: str = ""
    badge: str = ""
    text: str = ""
    class_name: str = ""
    action: str = ""
    auto_theme: bool = False
    nonce: Optional[str] = None


def get_settings() -> dict:
    """Return ``settings.RECAPTCHA`` merged over ``DEFAULTS``."""
    user_settings = getattr(settings, "RECAPTCHA", None) or {}
    unknown = set(user_settings) - set(DEFAULTS)
    if unknown:
        raise ImproperlyConfigured(
            f"Unknown RECAPTCHA setting(s): {', '.join(sorted(unknown))}"
        )
    return {**DEFAULTS, **user_settings}


def base_url(use_recaptcha_net: bool = False) -> str:
    return RECAPTCHA_NET_BASE_URL if use_recaptcha_net else GOOGLE_BASE_URL


def get_config(**overrides) -> WidgetConfig:
    values = get_settings()
    config = WidgetConfig(
        base_url=base_url(values["USE_RECAPTCHA_NET"]),
        site_key=values["SITE_KEY"],
        version=values["VERSION"],
        size=values["SIZE"],
        theme=values["THEME"],
        language=values["LANGUAGE"],
        callback=values["CALLBACK"],
        error_callback=values["ERROR_CALLBACK"],
        expired_callback=values["EXPIRED_CALLBACK"],
        badge=values["BADGE"],
        text=values["BUTTON_TEXT"],
        class_name=values["CLASS_NAME"],
        action=values["ACTION"],
        auto_theme=bool(values["AUTO_THEME"]),
    )

    field_names = {f.name for f in fields(WidgetConfig)}
    unknown = set(overrides) - field_names
    if unknown:
        raise TypeError(f"Unknown reCAPTCHA option(s): {', '.join(sorted(unknown))}")
    config = replace(config, **{k: v for k, v in overrides.items() if v is not None})

    if not config.site_key:
        logger.warning("reCAPTCHA site key is empty; the widget will fail to load")
    if config.size not in SIZES:
        logger.warning("Unexpected reCAPTCHA size %r", config.size)
    if config.theme not in THEMES:
        logger.warning("Unexpected reCAPTCHA theme %r", config.theme)
    if config.badge not in BADGES:
        logger.warning("Unexpected reCAPTCHA badge %r", config.badge)
    return config
