"""Message resolution: turn a message id plus arguments into localized text.

Templates use positional ``{0}``/``{1}``/``{2}`` placeholders. Range messages
are always given ``(display_name, min, max)``, so a template can reference
any slot by index even when a bound is unset.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from formguard.config.models import MessagesConfig


class MessageResolver(Protocol):
    """Anything that can format a message id for a locale."""

    def format(self, message_id: str, locale: str | None, *args: Any) -> str: ...


def normalize_locale(locale: str) -> str:
    """``"ja-JP"`` / ``"JA_jp"`` → ``"ja_JP"``; ``"EN"`` → ``"en"``."""
    parts = locale.replace("-", "_").split("_")
    language = parts[0].lower()
    if len(parts) == 1:
        return language
    return "_".join([language, parts[1].upper(), *parts[2:]])


class MessageCatalog:
    """In-memory, locale-aware catalog of message templates.

    Lookup order for a locale such as ``ja_JP``: ``ja_JP`` → ``ja`` →
    the default locale.
    """

    def __init__(
        self,
        templates: Mapping[str, Mapping[str, str]],
        *,
        default_locale: str = "en",
    ) -> None:
        self._templates: dict[str, dict[str, str]] = {
            normalize_locale(loc): dict(entries) for loc, entries in templates.items()
        }
        self._default_locale = normalize_locale(default_locale)

    @classmethod
    def from_config(cls, config: MessagesConfig) -> MessageCatalog:
        return cls(config.catalog, default_locale=config.default_locale)

    @property
    def default_locale(self) -> str:
        return self._default_locale

    @property
    def locales(self) -> list[str]:
        return sorted(self._templates)

    def template(self, message_id: str, locale: str | None = None) -> str:
        """Return the raw template for *message_id*.

        Raises:
            KeyError: If no locale in the fallback chain defines the id.
        """
        for candidate in self._fallback_chain(locale):
            entries = self._templates.get(candidate)
            if entries is not None and message_id in entries:
                return entries[message_id]
        msg = f"No message registered for id={message_id!r}, locale={locale!r}"
        raise KeyError(msg)

    def format(self, message_id: str, locale: str | None, *args: Any) -> str:
        return self.template(message_id, locale).format(*args)

    def _fallback_chain(self, locale: str | None) -> list[str]:
        chain: list[str] = []
        if locale:
            normalized = normalize_locale(locale)
            chain.append(normalized)
            language = normalized.split("_", 1)[0]
            if language != normalized:
                chain.append(language)
        if self._default_locale not in chain:
            chain.append(self._default_locale)
        return chain
