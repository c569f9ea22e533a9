"""Contact endpoints - public submission, admin inbox."""

from fastapi import APIRouter, status

from src.portfolio.api.dependencies import AdminGuard, ContactServiceDep
from src.portfolio.schemas import ContactCreate, ContactRead, SuccessResponse

router = APIRouter(tags=["contacts"])


@router.post(
    "/contact",
    response_model=SuccessResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit contact message",
    responses={
        201: {"description": "Message stored"},
        400: {"description": "Invalid contact data"},
    },
)
async def submit_contact(request: ContactCreate, service: ContactServiceDep) -> SuccessResponse:
    await service.submit(request)
    return SuccessResponse()


@router.get(
    "/contacts",
    response_model=list[ContactRead],
    summary="List contact messages",
    dependencies=[AdminGuard],
)
async def list_contacts(service: ContactServiceDep) -> list[ContactRead]:
    contacts = await service.list_contacts()
    return [ContactRead.model_validate(c) for c in contacts]


@router.delete(
    "/contacts/{contact_id}",
    response_model=SuccessResponse,
    summary="Delete contact message",
    dependencies=[AdminGuard],
    responses={404: {"description": "Message not found"}},
)
async def delete_contact(contact_id: str, service: ContactServiceDep) -> SuccessResponse:
    await service.delete_contact(contact_id)
    return SuccessResponse()
