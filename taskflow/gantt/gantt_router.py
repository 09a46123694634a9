# taskflow/gantt/gantt_router.py

import logging

from fastapi import APIRouter, Depends, HTTPException

from taskflow.auth.session import require_user_id
from taskflow.fixtures import get_gantt_project
from taskflow.gantt.gantt_layout import GanttLayoutError, compute_layout
from taskflow.schemas.gantt_schema import GanttView, TimeScale

logger = logging.getLogger("taskflow.gantt")

router = APIRouter(
    prefix="/dashboard/gantt",
    tags=["gantt"],
    dependencies=[Depends(require_user_id)],
)


@router.get("", response_model=GanttView)
def get_gantt_chart(scale: TimeScale = TimeScale.DAY):
    project = get_gantt_project()

    try:
        layout = compute_layout(project.tasks, scale)
    except GanttLayoutError:
        logger.warning("gantt_empty_project", extra={"project_id": project.id})
        raise HTTPException(status_code=404, detail="Project has no tasks to chart")

    return GanttView(project=project, layout=layout)
