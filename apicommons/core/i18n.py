"""Message catalogs and locale resolution for user-facing error text."""

import logging
from collections.abc import Mapping

logger = logging.getLogger(__name__)


class I18nKeys:
    """Stable message identifiers used across error envelopes."""

    error_bad_request = "error_bad_request"
    error_bad_credentials = "error_bad_credentials"
    error_user_not_authenticated = "error_user_not_authenticated"
    error_not_found_server_error = "error_not_found_server_error"
    error_unknow_object_server_error = "error_unknow_object_server_error"
    error_internal_server_error = "error_internal_server_error"
    error_unknow_server_error = "error_unknow_server_error"


EN_MESSAGES: dict[str, str] = {
    I18nKeys.error_bad_request: "bad request",
    I18nKeys.error_bad_credentials: "bad credentials",
    I18nKeys.error_user_not_authenticated: "user not authenticated",
    I18nKeys.error_not_found_server_error: "resource not found",
    I18nKeys.error_unknow_object_server_error: "unknown object",
    I18nKeys.error_internal_server_error: "internal server error",
    I18nKeys.error_unknow_server_error: "unknown server error",
}

PT_BR_MESSAGES: dict[str, str] = {
    I18nKeys.error_bad_request: "requisição inválida",
    I18nKeys.error_bad_credentials: "credenciais inválidas",
    I18nKeys.error_user_not_authenticated: "usuário não autenticado",
    I18nKeys.error_not_found_server_error: "recurso não encontrado",
    I18nKeys.error_unknow_object_server_error: "objeto desconhecido",
    I18nKeys.error_internal_server_error: "erro interno do servidor",
    I18nKeys.error_unknow_server_error: "erro desconhecido do servidor",
}

DEFAULT_CATALOGS: dict[str, dict[str, str]] = {
    "en": EN_MESSAGES,
    "pt-BR": PT_BR_MESSAGES,
}


def _normalize(locale: str) -> str:
    return locale.strip().replace("_", "-").lower()


class Translator:
    """
    Resolve message keys against per-locale catalogs.

    Lookup order: exact locale, its language prefix (``pt-BR`` -> ``pt``),
    the default locale, then the key itself. Unknown keys are returned
    unchanged so free-text messages pass through.
    """

    def __init__(
        self,
        catalogs: Mapping[str, Mapping[str, str]] | None = None,
        default_locale: str = "en",
    ):
        source = DEFAULT_CATALOGS if catalogs is None else catalogs
        self._catalogs = {_normalize(k): dict(v) for k, v in source.items()}
        self.default_locale = default_locale

    @property
    def locales(self) -> list[str]:
        return list(self._catalogs)

    def supports(self, locale: str) -> bool:
        return self._find_catalog(locale) is not None

    def _find_catalog(self, locale: str | None) -> dict[str, str] | None:
        if not locale:
            return None
        normalized = _normalize(locale)
        if normalized in self._catalogs:
            return self._catalogs[normalized]
        language = normalized.split("-", 1)[0]
        for name, catalog in self._catalogs.items():
            if name == language or name.split("-", 1)[0] == language:
                return catalog
        return None

    def resolve(self, key: str, locale: str | None = None) -> str:
        for candidate in (locale, self.default_locale):
            catalog = self._find_catalog(candidate)
            if catalog is not None and key in catalog:
                return catalog[key]
        return key


def locale_from_header(accept_language: str | None, translator: Translator) -> str:
    """
    Pick the best supported locale from an ``Accept-Language`` header.

    Entries are ranked by their ``q`` weight; the translator's default locale
    is returned when nothing matches.
    """
    if not accept_language:
        return translator.default_locale

    ranked: list[tuple[float, int, str]] = []
    for index, part in enumerate(accept_language.split(",")):
        tag, _, params = part.strip().partition(";")
        tag = tag.strip()
        if not tag or tag == "*":
            continue
        weight = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                weight = float(params[2:])
            except ValueError:
                logger.debug("Ignoring malformed Accept-Language weight: %s", part)
                continue
        ranked.append((-weight, index, tag))

    for _, _, tag in sorted(ranked):
        if translator.supports(tag):
            return tag
    return translator.default_locale
