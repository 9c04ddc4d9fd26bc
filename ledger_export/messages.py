"""User-facing texts in the supported languages (English and German)."""

__copyright__ = "Copyright (C) 2026 slimslickner"
__license__ = "GNU GPLv2"

import datetime
import logging

logger = logging.getLogger(__name__)

LANGUAGES = ("en", "de")

_TEXTS = {
    "missing_category": {
        "en": "The transaction does not have an assigned category",
        "de": "Der Umsatz hat keine zugewiesene Kategorie",
    },
    "not_checked": {
        "en": "The transaction was not checked",
        "de": "Der Umsatz ist nicht als erledigt markiert",
    },
    "empty_counter_account": {
        "en": "Empty counter account from category '{category}'",
        "de": "Leeres Gegenkonto aus der Kategorie '{category}'",
    },
    "incomplete_export": {
        "en": "Incomplete export because of transaction errors:",
        "de": "Unvollständiger Export wegen Fehlern bei Umsätzen:",
    },
}

_DATE_FORMATS = {
    "en": "%Y-%m-%d",
    "de": "%d.%m.%Y",
}


class Messages:
    """Message catalog for one language."""

    def __init__(self, language: str = "en"):
        if language not in LANGUAGES:
            logger.warning(f"Unsupported language '{language}', using English")
            language = "en"
        self.language = language

    def text(self, key: str, **values) -> str:
        return _TEXTS[key][self.language].format(**values)

    def missing_category(self) -> str:
        return self.text("missing_category")

    def not_checked(self) -> str:
        return self.text("not_checked")

    def empty_counter_account(self, category: str) -> str:
        return self.text("empty_counter_account", category=category)

    def incomplete_export(self) -> str:
        return self.text("incomplete_export")

    def date(self, value: datetime.date) -> str:
        return value.strftime(_DATE_FORMATS[self.language])
