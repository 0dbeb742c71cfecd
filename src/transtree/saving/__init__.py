"""Persistence of edited translations and live runtime hot-swapping.

Submodules:
    dispatcher - SaveDispatcher, SaveSummary, LanguageSaveResult
    runtime    - I18nRuntime protocol and the in-memory DictRuntime

Python 3.13+.
"""

from .dispatcher import LanguageSaveResult, SaveDispatcher, SaveSummary
from .runtime import DictRuntime, I18nRuntime

__all__ = [
    "DictRuntime",
    "I18nRuntime",
    "LanguageSaveResult",
    "SaveDispatcher",
    "SaveSummary",
]
