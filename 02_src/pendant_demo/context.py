"""Application context shared by every handler."""

from dataclasses import dataclass

from .config import ExtensionSettings
from .errors import log_and_continue
from .i18n import Translations
from .models import LoggingLevel, Version
from .service import IController, IExtensionService, IPendant


@dataclass
class ExtensionContext:
    """Service handles, locale and settings for the lifetime of the process."""

    service: IExtensionService
    settings: ExtensionSettings
    translations: Translations
    language: str = "en"

    @property
    def pendant(self) -> IPendant:
        return self.service.pendant

    @property
    def controller(self) -> IController:
        return self.service.controller

    @property
    def api_version(self) -> Version:
        return self.service.api_version

    def tr(self, key: str, *args: object) -> str:
        return self.translations.tr(key, *args)

    async def remote_log(self, level: LoggingLevel, message: str) -> None:
        """Send a line to the pendant log; a failure here is only recorded locally."""
        with log_and_continue("writing to the pendant log"):
            await self.service.log(level, message)
