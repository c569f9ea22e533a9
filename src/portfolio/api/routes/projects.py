"""Project endpoints - portfolio entries CRUD."""

from fastapi import APIRouter, status

from src.portfolio.api.dependencies import AdminGuard, ProjectServiceDep
from src.portfolio.schemas import ProjectCreate, ProjectRead, ProjectUpdate, SuccessResponse

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get(
    "",
    response_model=list[ProjectRead],
    summary="List projects",
    description="List every project, most recently created first.",
)
async def list_projects(service: ProjectServiceDep) -> list[ProjectRead]:
    projects = await service.list_projects()
    return [ProjectRead.model_validate(p) for p in projects]


@router.get(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Get project",
    responses={
        200: {"description": "Project details"},
        400: {"description": "Malformed project ID"},
        404: {"description": "Project not found"},
    },
)
async def get_project(project_id: str, service: ProjectServiceDep) -> ProjectRead:
    project = await service.get_project(project_id)
    return ProjectRead.model_validate(project)


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    dependencies=[AdminGuard],
    responses={
        201: {"description": "Project created"},
        400: {"description": "Invalid project data"},
    },
)
async def create_project(request: ProjectCreate, service: ProjectServiceDep) -> ProjectRead:
    project = await service.create_project(request)
    return ProjectRead.model_validate(project)


@router.put(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Update project",
    description="Merge the given fields onto the project and revalidate the whole record.",
    dependencies=[AdminGuard],
    responses={
        200: {"description": "Project updated"},
        400: {"description": "Invalid project data or malformed ID"},
        404: {"description": "Project not found"},
    },
)
async def update_project(
    project_id: str,
    request: ProjectUpdate,
    service: ProjectServiceDep,
) -> ProjectRead:
    project = await service.update_project(project_id, request)
    return ProjectRead.model_validate(project)


@router.delete(
    "/{project_id}",
    response_model=SuccessResponse,
    summary="Delete project",
    dependencies=[AdminGuard],
    responses={
        200: {"description": "Project deleted"},
        404: {"description": "Project not found"},
    },
)
async def delete_project(project_id: str, service: ProjectServiceDep) -> SuccessResponse:
    await service.delete_project(project_id)
    return SuccessResponse()
