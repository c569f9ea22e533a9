"""Repository for Contact entity."""

from src.portfolio.models import Contact
from src.portfolio.repositories.base import BaseRepository


class ContactRepository(BaseRepository[Contact]):
    model = Contact
