# place_search/system_locale.py
import locale
from typing import Optional, Tuple


class SystemLocale:
    """
    Reads the process locale, e.g. "en_US.UTF-8" -> language "en", region "US".
    Either part may be missing (C/POSIX locale, bare "fr", ...).
    """

    def _parts(self) -> Tuple[Optional[str], Optional[str]]:
        name = locale.getlocale()[0]
        if not name or name in ("C", "POSIX"):
            return None, None
        name = name.split(".", 1)[0].replace("-", "_")
        lang, _, region = name.partition("_")
        return (lang.lower() or None), (region.upper() or None)

    def language_code(self) -> Optional[str]:
        return self._parts()[0]

    def region_code(self) -> Optional[str]:
        return self._parts()[1]
