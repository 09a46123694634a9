# taskflow/project/project_router.py

from fastapi import APIRouter, Depends

from taskflow.auth.session import require_user, require_user_id
from taskflow.fixtures import get_projects
from taskflow.models.user import User
from taskflow.project.project_service import ALL_STATUSES, filter_projects
from taskflow.schemas.auth_schema import UserRead
from taskflow.schemas.project_schema import ProjectList, ProjectStatus, ProjectSummary

RECENT_PROJECTS_LIMIT = 5

router = APIRouter(
    prefix="/dashboard",
    tags=["projects"],
    dependencies=[Depends(require_user_id)],
)


# ==========================
#  DASHBOARD HOME
# ==========================
@router.get("")
def get_dashboard(user: User = Depends(require_user)):
    recent = [
        ProjectSummary(id=p.id, name=p.name, status=p.status)
        for p in get_projects()[:RECENT_PROJECTS_LIMIT]
    ]
    return {
        "user": UserRead.model_validate(user),
        "user_projects": recent,
    }


# ==========================
#  LIST PROJECTS
# ==========================
@router.get("/projects", response_model=ProjectList)
def list_projects(status: str = ALL_STATUSES):
    return ProjectList(
        projects=filter_projects(get_projects(), status),
        statuses=list(ProjectStatus),
    )
