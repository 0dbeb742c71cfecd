"""Editor configuration.

Provides a single frozen dataclass holding every setting an editing
session needs to build its resolver and HTTP client.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from transtree.constants import (
    DEFAULT_FALLBACK_LANGUAGE,
    DEFAULT_FALLBACK_PATH,
    DEFAULT_LANGUAGES,
    DEFAULT_TIMEOUT,
    STATUS_DISMISS_SECONDS,
)

__all__ = ["EditorConfig"]


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Immutable configuration for a TranslationEditor.

    All fields have defaults; ``EditorConfig()`` works for a purely local
    session backed by ``locales/{locale}/translation.json``.

    Attributes:
        api_base_url: Translation API root URL (None: fallback documents only)
        timeout: HTTP timeout in seconds
        languages: Initially selected languages; the first is the base language
        available_languages: Languages offered when the API cannot list them
        fallback_path: Path template for bundled documents ({locale} placeholder)
        fallback_language: Bundled document used for languages that ship none
            (None disables substitution)
        status_dismiss_seconds: Lifetime of a status message

    Example:
        >>> config = EditorConfig(
        ...     api_base_url="https://admin.example.com/api",
        ...     languages=("en", "es", "de"),
        ... )
        >>> editor = TranslationEditor.from_config(config)
    """

    api_base_url: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    languages: tuple[str, ...] = DEFAULT_LANGUAGES
    available_languages: tuple[str, ...] = DEFAULT_LANGUAGES
    fallback_path: str = DEFAULT_FALLBACK_PATH
    fallback_language: str | None = DEFAULT_FALLBACK_LANGUAGE
    status_dismiss_seconds: float = STATUS_DISMISS_SECONDS

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If languages is empty, timeout or
                status_dismiss_seconds is not positive, or fallback_path
                lacks the {locale} placeholder.
        """
        if not self.languages:
            msg = "languages must contain at least one language"
            raise ValueError(msg)
        if self.timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)
        if self.status_dismiss_seconds <= 0:
            msg = "status_dismiss_seconds must be positive"
            raise ValueError(msg)
        if "{locale}" not in self.fallback_path:
            msg = "fallback_path must contain '{locale}' placeholder"
            raise ValueError(msg)
