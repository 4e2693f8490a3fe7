"""
Fallback Handler for phrasebook

A missing-key handler that records which keys were missing in which
locale, so gaps in a phrase dictionary can be reported.

License: BSD
"""

import logging
from datetime import datetime
from typing import Any

from .transformer import transform_phrase

logger = logging.getLogger(__name__)


class MissingKeyRecorder:
    """
    Records missing translation keys and returns a fallback result.

    Pass an instance as ``on_missing_key`` to a Translator.

    Example:
        >>> recorder = MissingKeyRecorder()
        >>> translator = Translator(on_missing_key=recorder)
        >>> translator.t('install.new_key')
        'install.new_key'
        >>> recorder.missing_keys()
        {'install.new_key'}
    """

    def __init__(self, interpolate: bool = False, logger=None):
        """
        Initialize the recorder.

        Args:
            interpolate: Run the key through the transformer as if it were
                the phrase (useful while phrases are still being written)
            logger: Logger for warnings (uses module logger if None)
        """
        self.interpolate = interpolate
        self.logger = logger or globals()["logger"]
        self._missing: dict[str, set[str]] = {}
        self._session_start = datetime.now()

    def __call__(self, key: str, options: Any, locale: str, matcher: Any, plural_rules: Any) -> str:
        self._missing.setdefault(key, set()).add(locale)
        self.logger.warning(f"Missing translation: {key} (locale: {locale})")

        if self.interpolate:
            return transform_phrase(key, options, locale, matcher, plural_rules)
        return key

    def missing_keys(self) -> set[str]:
        """Get all missing keys seen so far."""
        return set(self._missing)

    def locales_for(self, key: str) -> set[str]:
        """Get the locales in which ``key`` was missing."""
        return set(self._missing.get(key, ()))

    def has_missing(self) -> bool:
        return bool(self._missing)

    def missing_count(self) -> int:
        return len(self._missing)

    def clear(self) -> None:
        """Forget every recorded key."""
        self._missing.clear()

    def report_summary(self) -> str:
        """
        Generate a summary of missing keys grouped by namespace.

        The namespace is the first dotted segment of a key
        ('install.success' -> 'install').

        Returns:
            Human-readable report string
        """
        count = len(self._missing)
        duration = datetime.now() - self._session_start

        report = f"""
Missing Translations Report
============================
Duration: {duration}
Total Missing Keys: {count}
"""

        if count > 0:
            namespaces: dict[str, list[str]] = {}
            for key in sorted(self._missing):
                namespaces.setdefault(key.split(".")[0], []).append(key)

            for namespace in sorted(namespaces):
                keys = namespaces[namespace]
                report += f"\n{namespace}: {len(keys)} missing\n"
                for key in keys:
                    locales = ", ".join(sorted(self._missing[key]))
                    report += f"  - {key} ({locales})\n"
        else:
            report += "\nNo missing translations found!\n"

        return report
