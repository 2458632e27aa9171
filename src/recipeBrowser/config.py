"""Default configuration values for recipeBrowser."""

from __future__ import annotations

from typing import Final

# Number of recipes requested per page.  Matches the page size of the public
# recipe API the catalogue was modelled on, so "page 2" means the same thing
# whether the data comes from the network or from a local catalogue.
DEFAULT_PAGE_SIZE: Final[int] = 30

# ---------------------------------------------------------------------------
# User-facing message texts
# ---------------------------------------------------------------------------

INVALID_EVENT_TITLE: Final[str] = "Invalid Event"
INVALID_EVENT_DESCRIPTION: Final[str] = "Something went wrong."

SEARCH_ERROR_ID: Final[str] = "SearchRecipes.Error"
SEARCH_ERROR_TITLE: Final[str] = "Error"
UNKNOWN_ERROR_DESCRIPTION: Final[str] = "Unknown Error"

SETTINGS_SCHEMA_ID: Final[str] = "recipeBrowser/settings@1"
