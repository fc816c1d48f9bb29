"""
The process-wide Site.

All route access goes through get_site(). State lives only as long as the
process; a restart starts from an empty (or freshly seeded) site.
"""

from __future__ import annotations

import logging

from backend.config import settings
from newsroom.kernel.site import Site

logger = logging.getLogger(__name__)

site: Site | None = None


def init_site() -> Site:
    """
    Build the site from settings.
    Called once at application startup.
    """
    global site
    site = Site(
        admin_email=settings.ADMIN_EMAIL,
        admin_password=settings.ADMIN_PASSWORD,
        seed_demo_content=settings.SEED_DEMO_CONTENT,
    )
    logger.info("store: site ready with %d posts", len(site.list_posts()))
    return site


def close_site() -> None:
    """
    Drop the site.
    Called at application shutdown.
    """
    global site
    site = None


def get_site() -> Site:
    """FastAPI dependency returning the live site, building it on first use."""
    if site is None:
        return init_site()
    return site
