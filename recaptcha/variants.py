from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import MutableMapping, Optional

from django.core.exceptions import ImproperlyConfigured
from django.utils.safestring import SafeString

from . import generator
from .conf import VERSION_V2, VERSION_V2_INVISIBLE, VERSION_V3, WidgetConfig

logger = logging.getLogger(__name__)


class BaseVariant(ABC):
    slug: str = ""
    label: str = ""

    @abstractmethod
    def render(self, config: WidgetConfig, state: Optional[MutableMapping] = None) -> SafeString: ...


class CheckboxVariant(BaseVariant):
    slug = VERSION_V2
    label = "reCAPTCHA v2 checkbox"

    def render(self, config, state=None):
        return generator.recaptcha_v2(
            config.base_url,
            config.site_key,
            config.size,
            config.theme,
            config.language,
            config.callback,
            config.error_callback,
            config.expired_callback,
            auto_theme=config.auto_theme,
            nonce=config.nonce,
        )


class InvisibleVariant(BaseVariant):
    slug = VERSION_V2_INVISIBLE
    label = "reCAPTCHA v2 invisible"

    def render(self, config, state=None):
        return generator.recaptcha_v2_invisible(
            config.base_url,
            config.site_key,
            config.text,
            config.class_name,
            config.language,
            config.callback,
            config.error_callback,
            config.expired_callback,
            config.badge,
        )


class ScoreVariant(BaseVariant):
    slug = VERSION_V3
    label = "reCAPTCHA v3"

    def render(self, config, state=None):
        if state is None:
            state = {}
        return generator.recaptcha_v3(
            config.base_url,
            config.site_key,
            config.action,
            config.language,
            config.callback,
            generator.next_id(state),
            nonce=config.nonce,
        )


class VariantRegistry:
    def __init__(self):
        self._variants: dict[str, BaseVariant] = {}

    def register(self, variant: BaseVariant) -> None:
        self._variants[variant.slug] = variant

    def all_variants(self) -> list[BaseVariant]:
        return list(self._variants.values())

    def get(self, slug: str) -> BaseVariant | None:
        return self._variants.get(slug)

    def choices(self) -> list[tuple[str, str]]:
        return [(v.slug, v.label) for v in self._variants.values()]


registry = VariantRegistry()


def register_builtin_variants(target: VariantRegistry = registry) -> None:
    for cls in (CheckboxVariant, InvisibleVariant, ScoreVariant):
        target.register(cls())


def render_config(config: WidgetConfig, state: Optional[MutableMapping] = None) -> SafeString:
    variant = registry.get(config.version)
    if variant is None:
        raise ImproperlyConfigured(
            f"Unknown reCAPTCHA version {config.version!r}; "
            f"expected one of: {', '.join(slug for slug, _ in registry.choices())}"
        )
    logger.debug("Rendering %s widget", variant.slug)
    return variant.render(config, state)
