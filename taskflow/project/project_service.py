# taskflow/project/project_service.py

from typing import List, Optional

from taskflow.schemas.project_schema import ProjectRead

ALL_STATUSES = "all"


def filter_projects(projects: List[ProjectRead], status: Optional[str] = ALL_STATUSES) -> List[ProjectRead]:
    """Keep projects whose status matches, ignoring case; ``all`` keeps everything."""
    if not status or status.lower() == ALL_STATUSES:
        return list(projects)
    return [p for p in projects if p.status.value.lower() == status.lower()]
