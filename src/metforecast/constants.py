from enum import Enum

# Reference coordinate used when the caller supplies none (Moscow)
DEFAULT_LAT = 55.7558
DEFAULT_LON = 37.6176
DEFAULT_LOCATION = "Moscow"

# Preview output directory and filename
PREVIEW_DIR = "preview"
PREVIEW_HTML_NAME = "forecast-preview.html"

# Path of the interactive API documentation on the gateway
DOCS_PATH = "/api-docs"


class Language(str, Enum):
    """Display languages bundled with the viewer."""

    EN = "en"
    RU = "ru"

    def toggled(self) -> "Language":
        return Language.RU if self is Language.EN else Language.EN
