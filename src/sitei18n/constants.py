"""Shared constants for sitei18n.

Centralizes option defaults and path-shape constants used by the
localization package. Placing them here avoids circular imports between
the configuration layer and the components that read it.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Option defaults
    "DEFAULT_PATH_TEMPLATE",
    "DEFAULT_TEMPLATES_DIR",
    "DEFAULT_DATA_DIR",
    "DEFAULT_INDEX_FILE",
    # Path shape
    "LOCALE_PLACEHOLDER",
    "PATH_SEPARATOR",
    "MIN_LOCALE_EXTENSION_PARTS",
    # Translation keys
    "PATHS_KEY_PREFIX",
    # Locale data files
    "LOCALE_DATA_EXTENSIONS",
]

# ============================================================================
# OPTION DEFAULTS
# ============================================================================

# URL prefix for every locale that is not mounted at the site root.
DEFAULT_PATH_TEMPLATE: str = "/:locale/"

# Folder whose contents are expanded once per known locale.
DEFAULT_TEMPLATES_DIR: str = "localizable"

# Directory holding one locale-data file per locale (en.yml, fr.yml, ...).
DEFAULT_DATA_DIR: str = "locales"

# Appended to directory-style links ("/blog/") before index lookups.
DEFAULT_INDEX_FILE: str = "index.html"

# ============================================================================
# PATH SHAPE
# ============================================================================

LOCALE_PLACEHOLDER: str = ":locale"

PATH_SEPARATOR: str = "/"

# "<base>.<locale>.<ext>": anything shorter cannot carry a locale token.
MIN_LOCALE_EXTENSION_PARTS: int = 3

# ============================================================================
# TRANSLATION KEYS
# ============================================================================

# Path segments and page ids are translated through "paths.<segment>".
PATHS_KEY_PREFIX: str = "paths"

# ============================================================================
# LOCALE DATA FILES
# ============================================================================

LOCALE_DATA_EXTENSIONS: tuple[str, ...] = (".yml", ".yaml", ".json")
