"""
Unit tests for phrasebook/translator.py - the Translator facade.
"""

import logging
from unittest.mock import MagicMock

import pytest

from phrasebook.config import InterpolationOptions, TranslatorConfig
from phrasebook.exceptions import InvalidConfigurationError
from phrasebook.pluralization import DEFAULT_PLURAL_RULES, PluralRules
from phrasebook.tokens import TokenMatcher
from phrasebook.translator import Translator

PHRASES = {
    "hello": "Hello",
    "hi_name_welcome_to_place": "Hi, %{name}, welcome to %{place}!",
    "name_your_name_is_name": "%{name}, your name is %{name}!",
    "empty_string": "",
    "count_name": "%{smart_count} Name |||| %{smart_count} Names",
}


@pytest.fixture
def translator():
    return Translator(phrases=PHRASES)


class TestTranslate:
    """Test t() lookups and interpolation."""

    def test_simple_string(self, translator):
        assert translator.t("hello") == "Hello"

    def test_translate_alias(self, translator):
        assert translator.translate("hello") == "Hello"

    def test_missing_key_returns_key(self, translator):
        assert translator.t("bogus_key") == "bogus_key"

    def test_interpolates(self, translator):
        result = translator.t("hi_name_welcome_to_place", {"name": "Spike", "place": "the webz"})
        assert result == "Hi, Spike, welcome to the webz!"

    def test_missing_substitutions(self, translator):
        assert translator.t("hi_name_welcome_to_place", {"place": None}) == "Hi, %{name}, welcome to %{place}!"

    def test_same_placeholder_twice(self, translator):
        assert translator.t("name_your_name_is_name", {"name": "Spike"}) == "Spike, your name is Spike!"

    def test_default_value(self, translator):
        result = translator.t("can_i_call_you_name", {"_": "Can I call you %{name}?", "name": "Robert"})
        assert result == "Can I call you Robert?"

    def test_empty_translation(self, translator):
        assert translator.t("empty_string") == ""

    def test_empty_default(self, translator):
        assert translator.t("bogus_key", {"_": ""}) == ""

    def test_non_string_default_ignored(self, translator):
        assert translator.t("bogus_key", {"_": 5}) == "bogus_key"

    def test_missing_key_not_interpolated(self, translator):
        assert translator.t("Welcome %{name}", {"name": "Robert"}) == "Welcome %{name}"

    def test_dollar_signs(self, translator):
        result = translator.t("hi_name_welcome_to_place", {"name": "$abc $0", "place": "$1 $&"})
        assert result == "Hi, $abc $0, welcome to $1 $&!"

    def test_nested_phrases(self):
        translator = Translator(
            phrases={
                "nav": {"presentations": "Presentations", "hi_user": "Hi, %{user}.", "cta": {"join_now": "Join now!"}},
                "header.sign_in": "Sign In",
            }
        )
        assert translator.t("nav.presentations") == "Presentations"
        assert translator.t("nav.hi_user", {"user": "Raph"}) == "Hi, Raph."
        assert translator.t("nav.cta.join_now") == "Join now!"
        assert translator.t("header.sign_in") == "Sign In"


class TestPluralize:
    def test_with_mapping(self, translator):
        assert [translator.t("count_name", {"smart_count": n}) for n in range(4)] == [
            "0 Names",
            "1 Name",
            "2 Names",
            "3 Names",
        ]

    def test_with_number(self, translator):
        assert [translator.t("count_name", n) for n in range(4)] == ["0 Names", "1 Name", "2 Names", "3 Names"]

    def test_region_subtag(self):
        translator = Translator(phrases=PHRASES, locale="fr-FR")
        assert translator.t("count_name", 0) == "0 Name"

    def test_custom_plural_rules(self):
        rules = PluralRules(
            plural_types={"german_like": lambda n: 0 if n == 1 else 1},
            type_to_languages={"german_like": ["x1"]},
        )
        translator = Translator(
            phrases={"p": "%{smart_count} form zero |||| %{smart_count} form one"},
            locale="x1",
            plural_rules=rules,
        )
        assert translator.plural_rules is rules
        assert translator.t("p", 1) == "1 form zero"
        assert translator.t("p", 2) == "2 form one"


class TestMissingKeys:
    """Test allow_missing, on_missing_key and warn."""

    def test_warn_called(self):
        warn = MagicMock()
        translator = Translator(warn=warn)
        assert translator.t("nope") == "nope"
        warn.assert_called_once_with('Missing translation for key: "nope"')

    def test_default_warn_logs(self, caplog):
        with caplog.at_level(logging.WARNING, logger="phrasebook.translator"):
            Translator().t("nope")
        assert 'Missing translation for key: "nope"' in caplog.text

    def test_allow_missing_interpolates_key(self):
        translator = Translator(phrases=PHRASES, allow_missing=True)
        assert translator.t("Welcome %{name}", {"name": "Robert"}) == "Welcome Robert"

    def test_allow_missing_does_not_warn(self):
        warn = MagicMock()
        Translator(allow_missing=True, warn=warn).t("nope")
        warn.assert_not_called()

    def test_on_missing_key_called(self):
        sentinel = object()
        options = {}
        handler = MagicMock(return_value=sentinel)
        translator = Translator(on_missing_key=handler, locale="oz")

        assert translator.t("some key", options) is sentinel
        handler.assert_called_once_with("some key", options, "oz", translator.matcher, DEFAULT_PLURAL_RULES)

    def test_on_missing_key_result_not_transformed(self):
        translator = Translator(on_missing_key=lambda *args: "%{name}")
        assert translator.t("x", {"name": "Robert"}) == "%{name}"

    def test_on_missing_key_overrides_allow_missing(self):
        handler = MagicMock(return_value="handled")
        translator = Translator(on_missing_key=handler, allow_missing=True)
        assert translator.t("missing key") == "handled"
        assert handler.call_args[0][0] == "missing key"

    def test_on_missing_key_errors_propagate(self):
        def handler(*args):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            Translator(on_missing_key=handler).t("x")

    def test_default_phrase_beats_handler(self):
        handler = MagicMock()
        assert Translator(on_missing_key=handler).t("x", {"_": "d"}) == "d"
        handler.assert_not_called()


class TestInterpolationSyntax:
    def _create(self, interpolation):
        return Translator(phrases={}, allow_missing=True, interpolation=interpolation)

    def test_custom_tokens(self):
        assert self._create({"prefix": "{{", "suffix": "}}"}).t("Welcome {{name}}", {"name": "Robert"}) == (
            "Welcome Robert"
        )

    def test_same_prefix_and_suffix(self):
        translator = self._create({"prefix": "|", "suffix": "|"})
        assert translator.t("Welcome |name|, how are you, |name|?", {"name": "Robert"}) == (
            "Welcome Robert, how are you, Robert?"
        )

    def test_regex_like_tokens(self):
        translator = self._create({"prefix": "\\s.*", "suffix": "\\d.+"})
        assert translator.t("Welcome \\s.*name\\d.+", {"name": "Robert"}) == "Welcome Robert"

    def test_options_model(self):
        translator = self._create(InterpolationOptions(prefix="[", suffix="]"))
        assert translator.matcher == TokenMatcher("[", "]")

    def test_unusable_interpolation_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            self._create(42)

    def test_separator_rejected_at_construction(self):
        with pytest.raises(InvalidConfigurationError):
            self._create({"prefix": "||||", "suffix": "}}"})
        with pytest.raises(InvalidConfigurationError):
            self._create({"prefix": "{{", "suffix": "||||"})


class TestLocale:
    def test_defaults_to_en(self):
        assert Translator().get_locale() == "en"

    def test_get_and_set(self):
        translator = Translator()
        assert translator.set_locale("es") == "es"
        assert translator.locale == "es"
        translator.locale = "fr"
        assert translator.get_locale() == "fr"

    def test_falsy_locale_ignored(self):
        translator = Translator(locale="de")
        translator.set_locale("")
        translator.set_locale(None)
        assert translator.locale == "de"


class TestExists:
    def test_exists(self, translator):
        assert translator.exists("hello")
        assert translator.has("hello")
        assert not translator.exists("nope")

    def test_empty_phrase_is_not_existing_but_translates(self, translator):
        # exists() is a truthiness check; t() only needs a string
        assert not translator.exists("empty_string")
        assert translator.t("empty_string", {"_": "fallback"}) == ""


class TestDictionary:
    def test_extend_and_unset(self, translator):
        translator.extend({"bye": "Bye"}, "nav")
        assert translator.t("nav.bye") == "Bye"
        translator.unset("nav.bye")
        assert "nav.bye" not in translator.phrases

    def test_replace_and_clear(self, translator):
        translator.replace({"only": "Only"})
        assert translator.phrases == {"only": "Only"}
        translator.clear()
        assert translator.phrases == {}


class TestFromConfig:
    def test_from_config(self):
        config = TranslatorConfig(
            phrases={"a": {"b": "%{x}!"}},
            locale="ru",
            interpolation=InterpolationOptions(prefix="%{", suffix="}"),
        )
        translator = Translator.from_config(config)
        assert translator.locale == "ru"
        assert translator.t("a.b", {"x": 1}) == "1!"

    def test_from_config_allow_missing(self):
        translator = Translator.from_config(TranslatorConfig(allow_missing=True))
        assert translator.t("Hi %{n}", {"n": 2}) == "Hi 2"
