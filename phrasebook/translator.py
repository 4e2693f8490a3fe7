"""
Translator facade for phrasebook

Holds the phrase dictionary, the current locale and the missing-key
policy, and hands resolved phrases to the transformer.

License: BSD
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Protocol

from .config import TranslatorConfig
from .phrases import PhraseStore
from .pluralization import DEFAULT_PLURAL_RULES, PluralRules
from .tokens import TokenMatcher, as_matcher
from .transformer import DEFAULT_FIELD, Substitutions, transform_phrase

logger = logging.getLogger(__name__)


class MissingKeyHandler(Protocol):
    """Produces the result of ``t()`` for a key with no phrase."""

    def __call__(
        self,
        key: str,
        options: Any,
        locale: str,
        matcher: TokenMatcher,
        plural_rules: PluralRules,
    ) -> Any: ...


class WarnHook(Protocol):
    """Receives the missing-key diagnostic."""

    def __call__(self, message: str) -> Any: ...


def _log_warning(message: str) -> None:
    logger.warning(message)


class Translator:
    """
    Looks up phrases by key and transforms them for the current locale.

    Example:
        translator = Translator(
            phrases={'inbox': {'count': '%{smart_count} message |||| %{smart_count} messages'}},
            locale='en',
        )
        translator.t('inbox.count', 3)
        # Returns: "3 messages"
    """

    def __init__(
        self,
        phrases: Optional[Mapping[str, Any]] = None,
        locale: str = "en",
        allow_missing: bool = False,
        on_missing_key: Optional[MissingKeyHandler] = None,
        warn: Optional[WarnHook] = None,
        interpolation: Any = None,
        plural_rules: Optional[PluralRules] = None,
    ):
        """
        Initialize translator.

        Args:
            phrases: Nested phrase mapping
            locale: Locale code (e.g., 'en', 'fr-FR', 'ru')
            allow_missing: Transform missing keys as if they were phrases
            on_missing_key: Handler for missing keys; takes precedence over
                allow_missing
            warn: Receives the diagnostic for missing keys when no handler
                is set (defaults to logging a warning)
            interpolation: InterpolationOptions or {'prefix', 'suffix'} mapping
            plural_rules: Replaces the built-in plural rules entirely

        Raises:
            InvalidConfigurationError: If a delimiter is '||||'
        """
        self._store = PhraseStore(phrases)
        self._locale = locale or "en"

        if callable(on_missing_key):
            self.on_missing_key: Optional[MissingKeyHandler] = on_missing_key
        elif allow_missing:
            self.on_missing_key = transform_phrase
        else:
            self.on_missing_key = None

        self.warn: WarnHook = warn or _log_warning
        self._matcher = as_matcher(interpolation)
        self._plural_rules = plural_rules if plural_rules is not None else DEFAULT_PLURAL_RULES

    @classmethod
    def from_config(cls, config: TranslatorConfig) -> "Translator":
        """Create a translator from validated options."""
        return cls(
            phrases=config.phrases,
            locale=config.locale,
            allow_missing=config.allow_missing,
            on_missing_key=config.on_missing_key,
            warn=config.warn,
            interpolation=config.interpolation,
            plural_rules=config.plural_rules,
        )

    @property
    def locale(self) -> str:
        return self._locale

    @locale.setter
    def locale(self, value: str) -> None:
        self.set_locale(value)

    def get_locale(self) -> str:
        return self._locale

    def set_locale(self, value: Optional[str]) -> str:
        """
        Switch to a different locale.

        Falsy values leave the current locale unchanged.

        Returns:
            The locale in effect afterwards
        """
        if value:
            self._locale = value
        return self._locale

    @property
    def matcher(self) -> TokenMatcher:
        return self._matcher

    @property
    def plural_rules(self) -> PluralRules:
        return self._plural_rules

    @property
    def phrases(self) -> dict[str, str]:
        """Copy of the flattened phrase dictionary."""
        return self._store.as_dict()

    def extend(self, phrases: Mapping[str, Any], prefix: Optional[str] = None) -> None:
        self._store.extend(phrases, prefix)

    def unset(self, phrases: Any, prefix: Optional[str] = None) -> None:
        self._store.unset(phrases, prefix)

    def clear(self) -> None:
        self._store.clear()

    def replace(self, phrases: Mapping[str, Any]) -> None:
        self._store.replace(phrases)

    def t(self, key: str, options: Optional[Substitutions] = None) -> Any:
        """
        Get the transformed phrase for ``key``.

        Args:
            key: Dot-separated key (e.g., 'nav.hello')
            options: Placeholder values, or a number as the smart_count
                shortcut. A string under '_' is used as the phrase when the
                key is missing.

        Returns:
            Transformed phrase. For a missing key with no default, the
            missing-key handler's result, or the key itself.
        """
        options = {} if options is None else options
        phrase = self._store.lookup(key)

        if not isinstance(phrase, str):
            default = options.get(DEFAULT_FIELD) if isinstance(options, Mapping) else None
            if isinstance(default, str):
                phrase = default
            elif self.on_missing_key is not None:
                return self.on_missing_key(key, options, self._locale, self._matcher, self._plural_rules)
            else:
                self.warn(f'Missing translation for key: "{key}"')
                return key

        return transform_phrase(phrase, options, self._locale, self._matcher, self._plural_rules)

    translate = t

    def exists(self, key: str) -> bool:
        """True if ``key`` holds a non-empty phrase."""
        return self._store.has(key)

    has = exists
