"""SQLAlchemy ORM models."""

from irsite.models.company import Base, Company
from irsite.models.press_release import PressRelease
from irsite.models.leader import Leader
from irsite.models.cms_entry import CmsEntry
from irsite.models.theme import Template, Theme

__all__ = ["Base", "Company", "PressRelease", "Leader", "CmsEntry", "Theme", "Template"]
