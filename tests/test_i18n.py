import pytest

from apicommons.core.i18n import I18nKeys, Translator, locale_from_header


def test_resolve_exact_locale(translator: Translator):
    assert translator.resolve(I18nKeys.error_bad_request, "pt-BR") == "requisição inválida"


@pytest.mark.parametrize("locale", ["pt", "pt_BR", "PT-br", "pt-PT"])
def test_resolve_matches_language(translator: Translator, locale: str):
    assert translator.resolve(I18nKeys.error_bad_request, locale) == "requisição inválida"


def test_resolve_unknown_locale_uses_default(translator: Translator):
    assert translator.resolve(I18nKeys.error_bad_request, "ja-JP") == "bad request"
    assert translator.resolve(I18nKeys.error_bad_request) == "bad request"


def test_resolve_unknown_key_returns_key(translator: Translator):
    assert translator.resolve("error_does_not_exist", "en") == "error_does_not_exist"


def test_custom_catalogs():
    translator = Translator({"es": {"greeting": "hola"}}, default_locale="es")
    assert translator.resolve("greeting", "en") == "hola"
    assert translator.locales == ["es"]


@pytest.mark.parametrize(
    "header, expected",
    [
        (None, "en"),
        ("", "en"),
        ("*", "en"),
        ("fr-FR, pt-BR;q=0.8, en;q=0.5", "pt-BR"),
        ("en;q=0.4, pt-BR;q=0.9", "pt-BR"),
        ("en;q=abc, pt-BR", "pt-BR"),
        ("de", "en"),
    ],
)
def test_locale_from_header(translator: Translator, header, expected):
    assert locale_from_header(header, translator) == expected
