from .config import InterpolationOptions, TranslatorConfig
from .exceptions import InvalidArgumentError, InvalidConfigurationError, PhrasebookError
from .fallback_handler import MissingKeyRecorder
from .phrases import PhraseStore, flatten_phrases
from .pluralization import (
    DEFAULT_PLURAL_RULES,
    PluralFamily,
    PluralRules,
    plural_index,
    resolve_family,
)
from .tokens import PLURAL_SEPARATOR, TokenMatcher, build_matcher
from .transformer import COUNT_FIELD, transform_phrase
from .translator import Translator

__version__ = "0.1.0"

__all__ = [
    "COUNT_FIELD",
    "DEFAULT_PLURAL_RULES",
    "InterpolationOptions",
    "InvalidArgumentError",
    "InvalidConfigurationError",
    "MissingKeyRecorder",
    "PLURAL_SEPARATOR",
    "PhraseStore",
    "PhrasebookError",
    "PluralFamily",
    "PluralRules",
    "TokenMatcher",
    "Translator",
    "TranslatorConfig",
    "build_matcher",
    "flatten_phrases",
    "plural_index",
    "resolve_family",
    "transform_phrase",
]
