"""
Configuration models for phrasebook.

Translator options are validated with pydantic. ``TranslatorConfig.from_env``
lets PHRASEBOOK_LOCALE and PHRASEBOOK_ALLOW_MISSING fill in defaults.
"""

import os
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .pluralization import PluralRules
from .tokens import DEFAULT_PREFIX, DEFAULT_SUFFIX

LOCALE_ENV = "PHRASEBOOK_LOCALE"
ALLOW_MISSING_ENV = "PHRASEBOOK_ALLOW_MISSING"

_TRUTHY = {"1", "true", "yes", "on"}


class InterpolationOptions(BaseModel):
    """Placeholder delimiters."""

    prefix: str = Field(default=DEFAULT_PREFIX, description="Text opening a placeholder")
    suffix: str = Field(default=DEFAULT_SUFFIX, description="Text closing a placeholder")


class TranslatorConfig(BaseModel):
    """
    Options accepted by Translator.

    Delimiters equal to '||||' are rejected when the Translator builds its
    matcher, not here.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    phrases: Dict[str, Any] = Field(default_factory=dict, description="Nested phrase mapping")
    locale: str = Field(default="en", description="Current locale")
    allow_missing: bool = Field(
        default=False, description="Interpolate missing keys as if they were phrases"
    )
    on_missing_key: Optional[Callable[..., Any]] = Field(
        default=None, description="Called with (key, options, locale, matcher, plural_rules)"
    )
    warn: Optional[Callable[[str], Any]] = Field(
        default=None, description="Receives the missing-key diagnostic"
    )
    interpolation: InterpolationOptions = Field(default_factory=InterpolationOptions)
    plural_rules: Optional[PluralRules] = Field(
        default=None, description="Replaces the built-in plural rules entirely"
    )

    @classmethod
    def from_env(cls, **overrides: Any) -> "TranslatorConfig":
        """
        Build a config using environment variables as defaults.

        Explicit keyword overrides win over the environment.
        """
        values: dict[str, Any] = {}

        env_locale = os.environ.get(LOCALE_ENV)
        if env_locale:
            values["locale"] = env_locale

        env_allow_missing = os.environ.get(ALLOW_MISSING_ENV)
        if env_allow_missing is not None:
            values["allow_missing"] = env_allow_missing.strip().lower() in _TRUTHY

        values.update(overrides)
        return cls(**values)
