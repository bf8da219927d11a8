"""Shared denylists used to recognize page furniture.

Every filter in the extraction pipeline composes its own list from the
groups below so that a phrase added to a group reaches all filters that
use it.
"""

from __future__ import annotations

# Elements that never hold article text.
STRUCTURAL_TAGS = (
    "script",
    "style",
    "noscript",
    "nav",
    "header",
    "footer",
    "aside",
    "form",
    "button",
)

# Exact class names of common page widgets.
WIDGET_CLASSES = (
    "ad",
    "advertisement",
    "sidebar",
    "social-share",
    "comments",
    "related-posts",
    "breaking-news",
    "breadcrumb",
    "navigation",
    "menu",
    "widget",
    "share",
    "tags",
    "category",
    "author-bio",
)

# Class or id fragments that mark advertising.
AD_TOKENS = ("ad-", "ads-", "banner")

# Class or id fragments that mark navigation and promotional blocks.
NAVIGATION_TOKENS = (
    "breaking",
    "breadcrumb",
    "menu",
    "nav",
    "widget",
    "share",
    "social",
    "related",
    "recommend",
    "popular",
    "trending",
    "read-also",
    "read-more",
    "sidebar",
)

# Class or id fragments that mark consent notices.
CONSENT_TOKENS = ("cookie", "policy")

# Class or id fragments that mark article chrome rather than body text.
CHROME_TOKENS = (
    "ads",
    "tag",
    "category",
    "comment",
    "caption",
    "byline",
    "meta",
    "promo",
    "newsletter",
    "subscribe",
    "footer",
    "copyright",
)

# Iframe sources that point to ad networks.
AD_IFRAME_SOURCES = ("ads", "doubleclick")

# Site navigation phrases in English and Indonesian.
NAVIGATION_PHRASES = (
    "baca juga:",
    "baca juga ",
    "read also:",
    "breaking news",
    "dark/light mode",
    "switch mode",
    "subscribe now",
    "follow us",
    "share this",
    "related articles",
    "you may also like",
)

# Cookie, privacy and legal notices in English, Spanish and German.
LEGAL_PHRASES = (
    "cookie",
    "cookies",
    "política de cookies",
    "privacy policy",
    "política de privacidad",
    "aviso legal",
    "legal notice",
    "datenschutz",
    "© 20",
    "copyright",
)

# Shop chrome in English and Spanish.
COMMERCE_PHRASES = (
    "added to cart",
    "view cart",
    "continue shopping",
    "shopping cart",
    "checkout",
    "buy now",
    "añadido al carrito",
    "ver carrito",
    "seguir comprando",
    "carrito",
    "producto",
    "comprar",
)

# Account and mailing list prompts.
ACCOUNT_PHRASES = (
    "subscribe",
    "newsletter",
    "sign up",
    "login",
    "register",
    "account",
)

# Class and id fragments removed by the sanitizer.
SANITIZE_TOKENS: tuple[str, ...] = (
    AD_TOKENS + NAVIGATION_TOKENS + CONSENT_TOKENS
)


def _css_contains(attr: str, tokens: tuple[str, ...]) -> list[str]:
    """Return substring attribute selectors for ``tokens``."""

    return [f'[{attr}*="{token}"]' for token in tokens]


# Selectors removed from the tree before any scoring takes place.
SANITIZE_SELECTORS: tuple[str, ...] = (
    *STRUCTURAL_TAGS,
    *(f".{name}" for name in WIDGET_CLASSES),
    *_css_contains("class", SANITIZE_TOKENS),
    *_css_contains("id", SANITIZE_TOKENS),
    *(f'iframe[src*="{src}"]' for src in AD_IFRAME_SOURCES),
)

# Class and id fragments rejected by the content parsers.
SKIP_TOKENS: tuple[str, ...] = SANITIZE_TOKENS + CHROME_TOKENS

# Text phrases rejected by the content parsers.
SKIP_PHRASES: tuple[str, ...] = (
    NAVIGATION_PHRASES + LEGAL_PHRASES + COMMERCE_PHRASES
)

# Text phrases that lower the score of a candidate container.
PENALTY_PHRASES: tuple[str, ...] = (
    LEGAL_PHRASES + COMMERCE_PHRASES + ACCOUNT_PHRASES
)


def contains_any(text: str, phrases: tuple[str, ...]) -> bool:
    """Return whether lower-cased ``text`` contains one of ``phrases``."""

    return any(phrase in text for phrase in phrases)
