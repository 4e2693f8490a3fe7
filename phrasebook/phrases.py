"""
Phrase dictionary for phrasebook.

Stores phrases under flat keys; nested mappings are flattened with
dot-joined keys ({"nav": {"hello": ...}} becomes "nav.hello").
"""

from collections.abc import Iterator, Mapping
from typing import Any

from .exceptions import InvalidArgumentError


def _prefixed(key: str, prefix: str | None) -> str:
    return f"{prefix}.{key}" if prefix else key


def flatten_phrases(phrases: Mapping[str, Any], prefix: str | None = None) -> dict[str, str]:
    """
    Flatten nested phrase mappings into dotted keys.

    Args:
        phrases: Mapping whose values are strings or nested mappings
        prefix: Optional key prefix joined with '.'

    Returns:
        Flat mapping of dotted key to phrase

    Raises:
        InvalidArgumentError: If a value is neither a string nor a mapping
    """
    flat: dict[str, str] = {}
    for key, phrase in phrases.items():
        prefixed_key = _prefixed(key, prefix)
        if isinstance(phrase, Mapping):
            flat.update(flatten_phrases(phrase, prefixed_key))
        elif isinstance(phrase, str):
            flat[prefixed_key] = phrase
        else:
            raise InvalidArgumentError(
                f"Phrase for '{prefixed_key}' must be a string or mapping, not {type(phrase).__name__}"
            )
    return flat


class PhraseStore:
    """
    Flat key -> phrase dictionary.

    Example:
        >>> store = PhraseStore({"nav": {"hello": "Hello"}})
        >>> store.lookup("nav.hello")
        'Hello'
    """

    def __init__(self, phrases: Mapping[str, Any] | None = None):
        self._phrases: dict[str, str] = {}
        if phrases:
            self.extend(phrases)

    def extend(self, phrases: Mapping[str, Any], prefix: str | None = None) -> None:
        """Add phrases, overriding existing keys and keeping the rest."""
        self._phrases.update(flatten_phrases(phrases, prefix))

    def unset(self, phrases: str | Mapping[str, Any], prefix: str | None = None) -> None:
        """
        Remove a single key, or every key found in a (nested) mapping.

        Unknown keys are ignored.
        """
        if isinstance(phrases, str):
            self._phrases.pop(phrases, None)
            return

        for key, phrase in phrases.items():
            prefixed_key = _prefixed(key, prefix)
            if isinstance(phrase, Mapping):
                self.unset(phrase, prefixed_key)
            else:
                self._phrases.pop(prefixed_key, None)

    def clear(self) -> None:
        self._phrases.clear()

    def replace(self, phrases: Mapping[str, Any]) -> None:
        """Drop every phrase, then load ``phrases``."""
        self.clear()
        self.extend(phrases)

    def lookup(self, key: str) -> str | None:
        """Return the phrase stored under ``key``, or None."""
        return self._phrases.get(key)

    def has(self, key: str) -> bool:
        """True if ``key`` holds a non-empty phrase."""
        return bool(self._phrases.get(key))

    def keys(self):
        return self._phrases.keys()

    def as_dict(self) -> dict[str, str]:
        return dict(self._phrases)

    def __contains__(self, key: object) -> bool:
        return key in self._phrases

    def __iter__(self) -> Iterator[str]:
        return iter(self._phrases)

    def __len__(self) -> int:
        return len(self._phrases)
