"""
Placeholder matching for phrasebook

Finds ``%{name}`` style placeholders in a phrase. The prefix and suffix
are configurable and always matched literally.

License: BSD
"""

import logging
import re
from collections.abc import Iterator, Mapping
from typing import Any

from .exceptions import InvalidConfigurationError

logger = logging.getLogger(__name__)

# Separates the plural forms of a phrase; never usable as a delimiter
PLURAL_SEPARATOR = "||||"

DEFAULT_PREFIX = "%{"
DEFAULT_SUFFIX = "}"


class TokenMatcher:
    """
    Locates placeholders delimited by ``prefix`` and ``suffix``.

    The enclosed name is matched lazily, so identical prefix and suffix
    still pair up correctly:

        >>> matcher = TokenMatcher(prefix="|", suffix="|")
        >>> [name for _, name in matcher.scan("Hi |a| and |b|")]
        ['a', 'b']

    Instances hold no scanning state and can be shared freely.
    """

    def __init__(self, prefix: str = DEFAULT_PREFIX, suffix: str = DEFAULT_SUFFIX):
        if prefix == PLURAL_SEPARATOR or suffix == PLURAL_SEPARATOR:
            raise InvalidConfigurationError(f'"{PLURAL_SEPARATOR}" token is reserved for pluralization')

        self.prefix = prefix
        self.suffix = suffix
        self.pattern = re.compile(f"{re.escape(prefix)}(.*?){re.escape(suffix)}")

    def scan(self, phrase: str) -> Iterator[tuple[str, str]]:
        """
        Yield ``(placeholder_text, name)`` pairs from left to right.

        Each call starts a fresh scan.
        """
        for match in self.pattern.finditer(phrase):
            yield match.group(0), match.group(1)

    def substitute(self, phrase: str, values) -> str:
        """
        Replace every placeholder whose name has a value in ``values``.

        Values are converted with ``str()`` and inserted literally.
        Placeholders without a value (missing key or ``None``) are kept
        as they appear in the phrase.
        """

        def _replace(match: re.Match) -> str:
            value = values.get(match.group(1))
            if value is None:
                return match.group(0)
            return str(value)

        return self.pattern.sub(_replace, phrase)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenMatcher):
            return NotImplemented
        return (self.prefix, self.suffix) == (other.prefix, other.suffix)

    def __hash__(self) -> int:
        return hash((self.prefix, self.suffix))

    def __repr__(self) -> str:
        return f"TokenMatcher(prefix={self.prefix!r}, suffix={self.suffix!r})"


DEFAULT_MATCHER = TokenMatcher()


def build_matcher(prefix: str | None = None, suffix: str | None = None) -> TokenMatcher:
    """
    Build a placeholder matcher for the given delimiters.

    Args:
        prefix: Text opening a placeholder (default '%{')
        suffix: Text closing a placeholder (default '}')

    Returns:
        TokenMatcher instance

    Raises:
        InvalidConfigurationError: If prefix or suffix is '||||'
    """
    prefix = DEFAULT_PREFIX if prefix is None else prefix
    suffix = DEFAULT_SUFFIX if suffix is None else suffix
    if (prefix, suffix) == (DEFAULT_PREFIX, DEFAULT_SUFFIX):
        return DEFAULT_MATCHER

    logger.debug(f"Building token matcher for {prefix!r}...{suffix!r}")
    return TokenMatcher(prefix, suffix)


def as_matcher(config: Any = None) -> TokenMatcher:
    """
    Get a matcher from a matcher or a delimiter configuration.

    Args:
        config: TokenMatcher, {'prefix', 'suffix'} mapping, an object with
            ``prefix`` and ``suffix`` attributes (e.g. InterpolationOptions),
            or None for the default delimiters

    Raises:
        InvalidConfigurationError: If config is none of the above, or a
            delimiter is '||||'
    """
    if config is None:
        return DEFAULT_MATCHER
    if isinstance(config, TokenMatcher):
        return config
    if isinstance(config, Mapping):
        return build_matcher(config.get("prefix"), config.get("suffix"))
    if hasattr(config, "prefix") and hasattr(config, "suffix"):
        return build_matcher(config.prefix, config.suffix)
    raise InvalidConfigurationError(
        f"Interpolation config must be a TokenMatcher or define prefix and suffix, not {type(config).__name__}"
    )
