"""Translation of user-facing text.

Messages are looked up in gettext catalogues stored as
<l10n dir>/<language>/LC_MESSAGES/load_order_manager.mo. When no catalogue
exists for the selected language the untranslated text is used.
"""

import gettext
from pathlib import Path

from .logging_config import get_logger

logger = get_logger("localization")

TRANSLATION_DOMAIN = "load_order_manager"

_translations: gettext.NullTranslations = gettext.NullTranslations()
_language = "en"


def set_locale(language: str, l10n_dir: Path) -> None:
    """Select the language used for translated text.

    Args:
        language: Language code, e.g. 'en' or 'pt_BR'
        l10n_dir: Directory holding the translation catalogues
    """
    global _translations, _language

    _translations = gettext.translation(
        TRANSLATION_DOMAIN,
        localedir=str(l10n_dir),
        languages=[language],
        fallback=True,
    )
    _language = language
    logger.debug(f"Selected language: {language}")


def get_language() -> str:
    """Get the language code passed to the last set_locale() call."""
    return _language


def translate(message: str) -> str:
    """Translate a message into the selected language."""
    return _translations.gettext(message)
