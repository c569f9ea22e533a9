from uuid import UUID

from src.portfolio.core.exceptions import InvalidIdentifierError


def parse_identifier(raw: str, label: str = "record") -> UUID:
    """Parse a path identifier into a UUID.

    Raises:
        InvalidIdentifierError: If the value is not a well-formed UUID.
    """
    try:
        return UUID(raw)
    except (ValueError, AttributeError, TypeError) as e:
        raise InvalidIdentifierError(f"Invalid {label} ID format: {raw}") from e
