"""Language code utilities backed by Babel.

Provides BCP-47 to POSIX normalization, cached Babel Locale lookup, and
human-readable language labels for language pickers and status messages.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "is_known_language",
    "language_label",
    "normalize_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 code to POSIX format for Babel.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def is_known_language(locale_code: str) -> bool:
    """Check whether Babel recognizes a language code."""
    from babel import UnknownLocaleError  # noqa: PLC0415

    try:
        get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError, TypeError):
        return False
    return True


def language_label(locale_code: str, display_locale: str | None = None) -> str:
    """Human-readable name of a language.

    By default the name is given in the language itself ("Español" for
    "es"); pass display_locale to name it in another language. Unknown
    codes are returned unchanged.

    Example:
        >>> language_label("es")
        'Español'
        >>> language_label("es", "en")
        'Spanish'
        >>> language_label("xx-unknown")
        'xx-unknown'
    """
    from babel import UnknownLocaleError  # noqa: PLC0415

    try:
        locale = get_babel_locale(locale_code)
        target = get_babel_locale(display_locale) if display_locale else locale
    except (UnknownLocaleError, ValueError, TypeError) as e:
        logger.debug("No display name for %r: %s", locale_code, e)
        return locale_code
    name = locale.get_display_name(target)
    if not name:
        return locale_code
    return name[:1].upper() + name[1:]
