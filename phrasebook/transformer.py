"""
Phrase transformation for phrasebook

Turns a phrase template into display text: picks the plural form that
matches ``smart_count`` for the locale, then interpolates placeholders.

License: BSD
"""

import logging
from collections.abc import Mapping
from numbers import Real
from typing import Any, Union

from .exceptions import InvalidArgumentError
from .pluralization import DEFAULT_PLURAL_RULES, PluralRules, plural_index
from .tokens import PLURAL_SEPARATOR, as_matcher

logger = logging.getLogger(__name__)

# Substitution that selects the plural form
COUNT_FIELD = "smart_count"

# Option carrying a default phrase for missing keys
DEFAULT_FIELD = "_"

Substitutions = Union[int, float, Mapping[str, Any]]


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def normalize_substitutions(substitutions: Substitutions) -> Mapping[str, Any]:
    """
    Turn the count shorthand into a mapping.

    Raises:
        InvalidArgumentError: If substitutions is neither a number nor a mapping
    """
    if _is_number(substitutions):
        return {COUNT_FIELD: substitutions}
    if isinstance(substitutions, Mapping):
        return substitutions
    raise InvalidArgumentError(
        f"substitutions must be a number or a mapping, not {type(substitutions).__name__}"
    )


def select_plural_form(phrase: str, count: Real, locale: str, plural_rules: PluralRules) -> str:
    """
    Pick the form of a ``||||``-separated phrase that fits ``count``.

    Falls back to the first form when the category index has no form
    or selects an empty one.
    The selected form is stripped of surrounding whitespace.
    """
    forms = phrase.split(PLURAL_SEPARATOR)
    index = plural_index(plural_rules, locale, count)

    if isinstance(index, float) and index.is_integer():
        index = int(index)
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(forms):
        logger.debug(f"Plural index {index!r} out of range for {len(forms)} form(s), using form 0")
        index = 0

    return (forms[index] or forms[0]).strip()


def transform_phrase(
    phrase: str,
    substitutions: Substitutions | None = None,
    locale: str = "en",
    matcher: Any = None,
    plural_rules: PluralRules | None = None,
) -> str:
    """
    Choose the plural form of a phrase and interpolate it.

    Args:
        phrase: Phrase template, optionally with forms separated by '||||'
        substitutions: Placeholder values, or a number as a shortcut for
            {'smart_count': number}
        locale: Locale used to pick the plural form
        matcher: TokenMatcher or {'prefix', 'suffix'} delimiters
            (default '%{' and '}')
        plural_rules: Rule set to use instead of the built-in one

    Returns:
        Transformed phrase

    Raises:
        InvalidArgumentError: If phrase is not a string

    Example:
        >>> transform_phrase('Hello, %{name}!', {'name': 'Spike'})
        'Hello, Spike!'
        >>> transform_phrase('%{smart_count} message |||| %{smart_count} messages', 5)
        '5 messages'
    """
    if not isinstance(phrase, str):
        raise InvalidArgumentError("transform_phrase expects argument #1 to be string")

    if substitutions is None:
        return phrase

    options = normalize_substitutions(substitutions)
    token_matcher = as_matcher(matcher)
    rules = plural_rules if plural_rules is not None else DEFAULT_PLURAL_RULES

    result = phrase
    count = options.get(COUNT_FIELD)
    if _is_number(count) and result:
        result = select_plural_form(result, count, locale, rules)

    return token_matcher.substitute(result, options)
