"""
Pluralization Rules for phrasebook

Maps a (locale, count) pair to the index of the plural form a phrase
should use. Each language family has a category function returning a
small non-negative integer; locales are assigned to families through a
static table that callers can replace wholesale.

License: BSD
"""

import logging
import math
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from .exceptions import InvalidConfigurationError

logger = logging.getLogger(__name__)

CategoryFn = Callable[[int], int]


def _remainder(n: int, divisor: int) -> int:
    """Remainder carrying the sign of ``n`` (-9 -> -9 for divisor 10)."""
    if isinstance(n, int):
        remainder = abs(n) % divisor
        return -remainder if n < 0 else remainder
    return math.fmod(n, divisor)


def _arabic_plural_rule(n: int) -> int:
    """
    Arabic pluralization rule (6 plural forms).

    - 0, 1, 2 each have their own form
    - last two digits 3-10: few
    - last two digits 11-99: many
    - everything else (100, 101, 102, ...): other
    """
    if n < 3:
        return n
    last_two = _remainder(n, 100)
    if 3 <= last_two <= 10:
        return 3
    return 4 if last_two >= 11 else 5


def _chinese_plural_rule(n: int) -> int:
    return 0


def _czech_plural_rule(n: int) -> int:
    if n == 1:
        return 0
    return 1 if 2 <= n <= 4 else 2


def _french_plural_rule(n: int) -> int:
    return 1 if n > 1 else 0


def _german_plural_rule(n: int) -> int:
    return 0 if n == 1 else 1


def _icelandic_plural_rule(n: int) -> int:
    return 1 if (_remainder(n, 10) != 1 or _remainder(n, 100) == 11) else 0


def _lithuanian_plural_rule(n: int) -> int:
    last_two = _remainder(n, 100)
    last_one = _remainder(last_two, 10)
    if last_one == 1 and last_two != 11:
        return 0
    if 2 <= last_one <= 9 and not 11 <= last_two <= 19:
        return 1
    return 2


def _polish_plural_rule(n: int) -> int:
    if n == 1:
        return 0
    last_two = _remainder(n, 100)
    last_one = _remainder(last_two, 10)
    if 2 <= last_one <= 4 and (last_two < 10 or last_two >= 20):
        return 1
    return 2


def _russian_plural_rule(n: int) -> int:
    """
    Russian-like rule shared by Russian, Bosnian, Serbian and Croatian.

    Examples: 1, 21, 101 -> 0; 2-4, 22-24 -> 1; 0, 5-20, 111 -> 2
    """
    last_two = _remainder(n, 100)
    last_one = _remainder(last_two, 10)
    if last_two != 11 and last_one == 1:
        return 0
    if 2 <= last_one <= 4 and not 12 <= last_two <= 14:
        return 1
    return 2


def _slovenian_plural_rule(n: int) -> int:
    last_two = _remainder(n, 100)
    if last_two == 1:
        return 0
    if last_two == 2:
        return 1
    if last_two in (3, 4):
        return 2
    return 3


class PluralFamily(str, Enum):
    """Built-in plural families, named after a representative language."""

    ARABIC = "arabic"
    BOSNIAN_SERBIAN = "bosnian_serbian"
    CHINESE = "chinese"
    CROATIAN = "croatian"
    CZECH = "czech"
    FRENCH = "french"
    GERMAN = "german"
    ICELANDIC = "icelandic"
    LITHUANIAN = "lithuanian"
    POLISH = "polish"
    RUSSIAN = "russian"
    SLOVENIAN = "slovenian"

    def category(self, count: int) -> int:
        """Return the plural category index of ``count`` for this family."""
        return _FAMILY_RULES[self](count)


_FAMILY_RULES: dict[PluralFamily, CategoryFn] = {
    PluralFamily.ARABIC: _arabic_plural_rule,
    PluralFamily.BOSNIAN_SERBIAN: _russian_plural_rule,
    PluralFamily.CHINESE: _chinese_plural_rule,
    PluralFamily.CROATIAN: _russian_plural_rule,
    PluralFamily.CZECH: _czech_plural_rule,
    PluralFamily.FRENCH: _french_plural_rule,
    PluralFamily.GERMAN: _german_plural_rule,
    PluralFamily.ICELANDIC: _icelandic_plural_rule,
    PluralFamily.LITHUANIAN: _lithuanian_plural_rule,
    PluralFamily.POLISH: _polish_plural_rule,
    PluralFamily.RUSSIAN: _russian_plural_rule,
    PluralFamily.SLOVENIAN: _slovenian_plural_rule,
}


# Number of forms and their labels, in category index order
FAMILY_FORMS: dict[PluralFamily, tuple[str, ...]] = {
    PluralFamily.ARABIC: ("zero", "one", "two", "few", "many", "other"),
    PluralFamily.BOSNIAN_SERBIAN: ("one", "few", "many"),
    PluralFamily.CHINESE: ("other",),
    PluralFamily.CROATIAN: ("one", "few", "many"),
    PluralFamily.CZECH: ("one", "few", "other"),
    PluralFamily.FRENCH: ("one", "other"),
    PluralFamily.GERMAN: ("one", "other"),
    PluralFamily.ICELANDIC: ("one", "other"),
    PluralFamily.LITHUANIAN: ("one", "few", "other"),
    PluralFamily.POLISH: ("one", "few", "many"),
    PluralFamily.RUSSIAN: ("one", "few", "many"),
    PluralFamily.SLOVENIAN: ("one", "two", "few", "other"),
}


def flatten_language_map(type_to_languages: Mapping[str, Sequence[str]]) -> dict[str, str]:
    """
    Invert a family -> locales table into a locale -> family lookup.

    Later families overwrite earlier ones when a locale is listed twice.
    Empty locale entries are skipped.
    """
    language_to_type: dict[str, str] = {}
    for type_name, languages in type_to_languages.items():
        for language in languages:
            if language:
                language_to_type[language] = type_name
    return language_to_type


@dataclass(frozen=True)
class PluralRules:
    """
    A named set of category functions plus the locales that use each one.

    Example:
        >>> rules = PluralRules(
        ...     plural_types={"simple": lambda n: 0 if n == 1 else 1},
        ...     type_to_languages={"simple": ["en", "x1"]},
        ... )
        >>> plural_index(rules, "x1", 3)
        1
    """

    plural_types: Mapping[str, CategoryFn]
    type_to_languages: Mapping[str, Sequence[str]]
    language_to_type: Mapping[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "plural_types", MappingProxyType(dict(self.plural_types)))
        object.__setattr__(
            self,
            "type_to_languages",
            MappingProxyType({name: tuple(langs) for name, langs in self.type_to_languages.items()}),
        )
        object.__setattr__(
            self, "language_to_type", MappingProxyType(flatten_language_map(self.type_to_languages))
        )

    def family_name(self, locale: str) -> str | None:
        """
        Resolve ``locale`` to a family name.

        Tries the exact locale, then its language subtag (text before the
        first ``-``), then whatever ``en`` maps to.
        """
        locale = locale or ""
        return (
            self.language_to_type.get(locale)
            or self.language_to_type.get(locale.split("-", 1)[0])
            or self.language_to_type.get("en")
        )

    def supports_locale(self, locale: str) -> bool:
        """
        Check if a locale resolves without falling back to English rules.

        Args:
            locale: Locale identifier (e.g., 'fr', 'fr-FR')

        Returns:
            True if the locale or its language subtag is listed
        """
        locale = locale or ""
        return bool(
            self.language_to_type.get(locale) or self.language_to_type.get(locale.split("-", 1)[0])
        )


DEFAULT_PLURAL_RULES = PluralRules(
    plural_types={family.value: rule for family, rule in _FAMILY_RULES.items()},
    type_to_languages={
        PluralFamily.ARABIC.value: ["ar"],
        PluralFamily.BOSNIAN_SERBIAN.value: ["bs-Latn-BA", "bs-Cyrl-BA", "srl-RS", "sr-RS"],
        PluralFamily.CHINESE.value: ["id", "id-ID", "ja", "ko", "ko-KR", "lo", "ms", "th", "th-TH", "zh"],
        PluralFamily.CROATIAN.value: ["hr", "hr-HR"],
        PluralFamily.GERMAN.value: [
            "fa",
            "da",
            "de",
            "en",
            "es",
            "fi",
            "el",
            "he",
            "hi-IN",
            "hu",
            "hu-HU",
            "it",
            "nl",
            "no",
            "pt",
            "sv",
            "tr",
        ],
        PluralFamily.FRENCH.value: ["fr", "tl", "pt-br"],
        PluralFamily.RUSSIAN.value: ["ru", "ru-RU"],
        PluralFamily.LITHUANIAN.value: ["lt"],
        PluralFamily.CZECH.value: ["cs", "cs-CZ", "sk"],
        PluralFamily.POLISH.value: ["pl"],
        PluralFamily.ICELANDIC.value: ["is"],
        PluralFamily.SLOVENIAN.value: ["sl-SL"],
    },
)


def resolve_family(rules: PluralRules, locale: str) -> CategoryFn:
    """
    Get the category function that applies to ``locale``.

    Args:
        rules: Plural rule set to search
        locale: Locale identifier (e.g., 'en', 'fr-FR', 'sr-RS')

    Returns:
        Function mapping a count to a category index

    Raises:
        InvalidConfigurationError: If a custom rule set resolves neither
            the locale nor 'en', or maps it to an unknown family
    """
    name = rules.family_name(locale)
    if name is None:
        raise InvalidConfigurationError(
            f"No plural family for locale '{locale}' and no 'en' fallback in plural rules"
        )

    rule = rules.plural_types.get(name)
    if rule is None:
        raise InvalidConfigurationError(f"Plural family '{name}' has no category function")

    logger.debug(f"Locale '{locale}' uses plural family '{name}'")
    return rule


def plural_index(rules: PluralRules, locale: str, count: int) -> int:
    """
    Get the plural category index for ``count`` in ``locale``.

    Example:
        >>> plural_index(DEFAULT_PLURAL_RULES, 'en', 1)
        0
        >>> plural_index(DEFAULT_PLURAL_RULES, 'ar', 102)
        5
    """
    return resolve_family(rules, locale)(count)
