# taskflow/task/task_router.py

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from taskflow.auth.session import require_user_id
from taskflow.fixtures import get_tasks
from taskflow.schemas.task_schema import TaskList, TaskPriority, TaskRead, TaskStatus, TaskUpdate
from taskflow.task.task_service import (
    TaskNotFoundError,
    distinct_projects,
    filter_tasks,
    update_task,
)

logger = logging.getLogger("taskflow.task")

router = APIRouter(
    prefix="/dashboard/tasks",
    tags=["tasks"],
    dependencies=[Depends(require_user_id)],
)


@router.get("", response_model=TaskList)
def list_tasks(
    search: Optional[str] = None,
    priority: Optional[str] = None,
    status: Optional[str] = None,
    project: Optional[str] = None,
):
    tasks = get_tasks()
    return TaskList(
        tasks=filter_tasks(tasks, search=search, priority=priority, status=status, project=project),
        priorities=list(TaskPriority),
        statuses=list(TaskStatus),
        # project choices come from the unfiltered list
        projects=distinct_projects(tasks),
    )


@router.patch("/{task_id}", response_model=TaskRead)
def change_task(task_id: str, data: TaskUpdate):
    try:
        task = update_task(get_tasks(), task_id, data)
    except TaskNotFoundError:
        raise HTTPException(404, "Task not found")

    logger.info("task_changed_locally", extra={"task_id": task_id, **data.model_dump(exclude_none=True)})
    return task
