"""Translated UI strings loaded from LanguageBundle_<locale>.properties files."""

from pathlib import Path

from ..config import RESOURCES_DIR
from ..logging_config import get_logger

logger = get_logger(__name__)

BUNDLE_NAME = "LanguageBundle"
DEFAULT_LOCALE = "en"


def bundle_filename(locale_name: str) -> str:
    return f"{BUNDLE_NAME}_{locale_name}.properties"


def parse_properties(text: str) -> dict[str, str]:
    """Parse the key=value subset of the .properties format the bundles use."""
    entries: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line[0] in "#!":
            continue

        positions = [i for i in (line.find("="), line.find(":")) if i >= 0]
        if not positions:
            entries[line] = ""
            continue
        separator = min(positions)
        key = line[:separator].strip()
        value = line[separator + 1 :].strip()
        entries[key] = value.replace("\\n", "\n").replace("\\t", "\t")
    return entries


class Translations:
    """Strings for one locale, with {0}-style argument substitution."""

    def __init__(self, locale_name: str, strings: dict[str, str]):
        self.locale_name = locale_name
        self._strings = strings

    @classmethod
    def load(cls, locale_name: str, directory: Path = RESOURCES_DIR) -> "Translations":
        """Load the bundle for a locale.

        Tries the full locale ("ja_JP"), then its language ("ja"), then English.
        """
        candidates = [locale_name]
        language = locale_name.replace("-", "_").split("_")[0]
        if language and language != locale_name:
            candidates.append(language)
        if DEFAULT_LOCALE not in candidates:
            candidates.append(DEFAULT_LOCALE)

        for candidate in candidates:
            path = directory / bundle_filename(candidate)
            if path.is_file():
                if candidate != locale_name:
                    logger.info(
                        "Language bundle for %s not found - using %s", locale_name, candidate
                    )
                return cls(candidate, parse_properties(path.read_text(encoding="utf-8")))

        raise FileNotFoundError(f"No language bundle found for {locale_name}")

    def tr(self, key: str, *args: object) -> str:
        """Translated string for key with {0}, {1}, ... replaced by args."""
        text = self._strings[key]
        if not args:
            return text
        return text.format(*args)
