"""Contact inbox service."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.portfolio.core.exceptions import NotFoundError
from src.portfolio.core.logging import get_logger
from src.portfolio.core.validators import parse_identifier
from src.portfolio.models import Contact
from src.portfolio.repositories import ContactRepository
from src.portfolio.schemas.contact import ContactCreate

logger = get_logger(__name__)


class ContactService:
    def __init__(self, contact_repo: ContactRepository, session: AsyncSession):
        self.contact_repo = contact_repo
        self.session = session

    async def submit(self, data: ContactCreate) -> Contact:
        """Store an inbound message."""
        contact = Contact(**data.model_dump())
        self.contact_repo.add(contact)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Contact message received", contact_id=str(contact.id))
        return contact

    async def list_contacts(self) -> list[Contact]:
        return await self.contact_repo.list_newest_first()

    async def delete_contact(self, contact_id: str) -> None:
        """Delete a message.

        Raises:
            InvalidIdentifierError: If the ID is malformed.
            NotFoundError: If no message has that ID.
        """
        contact = await self.contact_repo.get_by_id(parse_identifier(contact_id, "contact"))
        if contact is None:
            raise NotFoundError(f"Contact {contact_id} not found")

        await self.contact_repo.delete(contact)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Contact message deleted", contact_id=contact_id)
