"""Model exports.

Import from here: `from src.portfolio.models import Project, Contact`
"""

from src.portfolio.models.contact import Contact
from src.portfolio.models.enums import ProjectCategory, ReplyType
from src.portfolio.models.project import Project

__all__ = [
    # Enums
    "ProjectCategory",
    "ReplyType",
    # Tables
    "Contact",
    "Project",
]
