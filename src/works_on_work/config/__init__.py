"""Configuration facade.

    from works_on_work.config import SiteSettings, load_site_config
"""

from works_on_work.config.paths import SitePaths
from works_on_work.config.settings import (
    CONFIG_FILENAME,
    ContentSettings,
    PageSettings,
    PathsSettings,
    SiteSettings,
    TokenSettings,
    load_site_config,
    save_site_config,
)

__all__ = [
    "CONFIG_FILENAME",
    "ContentSettings",
    "PageSettings",
    "PathsSettings",
    "SitePaths",
    "SiteSettings",
    "TokenSettings",
    "load_site_config",
    "save_site_config",
]
