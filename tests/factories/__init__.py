"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import ProjectFactory, ContactFactory
"""

from tests.factories.base import BaseFactory, short_id, utc_now
from tests.factories.contact import ContactFactory
from tests.factories.project import ProjectFactory

__all__ = [
    "BaseFactory",
    "ContactFactory",
    "ProjectFactory",
    "short_id",
    "utc_now",
]
