"""Localized string providers.

Formatters never read string tables directly: they receive a Localizer at
construction and call ``lookup`` with a key and optional placeholder values.
"""

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from functools import lru_cache
from importlib.resources import files
from typing import Any

from typing_extensions import override

logger = logging.getLogger(__name__)

_locales_path = files(__package__) / "locales"


class Localizer(ABC):

    @abstractmethod
    def template(self, key: str) -> str:
        """Return the raw template for key, or "" when it is missing."""
        pass

    def lookup(self, key: str, *args: Any) -> str:
        """Return the localized string for key with placeholders filled.

        Templates use ``str.format`` positional placeholders ("{0} hours ago").
        Missing keys and templates whose placeholders do not match the
        arguments resolve to an empty string.
        """
        template = self.template(key)
        if not template:
            logger.debug("No localized string for %r", key)
            return ""
        if not args:
            return template
        try:
            return template.format(*args)
        except (IndexError, KeyError, ValueError):
            logger.debug("Malformed template for %r: %r", key, template)
            return ""


class TableLocalizer(Localizer):
    """Localizer backed by an in-memory mapping of keys to templates."""

    def __init__(self, strings: Mapping[str, str]):
        self.strings: dict[str, str] = dict(strings)

    @override
    def template(self, key: str) -> str:
        return self.strings.get(key, "")


def available_locales() -> list[str]:
    """Names of the string tables shipped with the package."""
    return sorted(
        entry.name.removesuffix(".json")
        for entry in _locales_path.iterdir()
        if entry.name.endswith(".json")
    )


@lru_cache(maxsize=None)
def _load_table(name: str) -> dict[str, str]:
    return json.loads((_locales_path / f"{name}.json").read_text(encoding="utf-8"))


class BundleLocalizer(TableLocalizer):
    """Localizer reading a JSON string table from the package resources."""

    def __init__(self, locale: str = "en"):
        """
        Args:
            locale: Locale name; region-qualified names ("en_US", "it-IT")
                fall back to their language table

        Raises:
            LookupError: If no table exists for the locale or its language
        """
        known = available_locales()
        normalized = locale.replace("-", "_")
        candidates = [normalized, normalized.split("_")[0].lower()]
        for name in candidates:
            if name in known:
                self.locale: str = name
                super().__init__(_load_table(name))
                return
        raise LookupError(
            f"No string table for locale '{locale}'.\n"
            f"Available locales: {', '.join(known)}"
        )
