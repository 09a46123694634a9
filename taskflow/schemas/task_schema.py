# taskflow/schemas/task_schema.py

from enum import Enum
from typing import List, Optional
from datetime import date, datetime

from pydantic import BaseModel


class TaskPriority(str, Enum):
    CRITICAL = "Critique"
    HIGH = "Haute"
    MEDIUM = "Moyenne"
    LOW = "Basse"


class TaskStatus(str, Enum):
    TODO = "À faire"
    IN_PROGRESS = "En cours"
    IN_REVIEW = "En révision"
    DONE = "Terminé"
    ON_HOLD = "En attente"


class Assignee(BaseModel):
    id: str
    email: str


# --------- For reading a task (GET responses) ---------
class TaskRead(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    priority: TaskPriority
    status: TaskStatus
    due_date: Optional[date] = None
    project_id: str
    project_name: str
    assignees: List[Assignee] = []
    created_at: datetime
    updated_at: datetime


# --------- For local edits (PATCH) ---------
class TaskUpdate(BaseModel):
    priority: Optional[TaskPriority] = None
    status: Optional[TaskStatus] = None


class TaskProjectRef(BaseModel):
    id: str
    name: str


class TaskList(BaseModel):
    tasks: List[TaskRead]
    priorities: List[TaskPriority]
    statuses: List[TaskStatus]
    projects: List[TaskProjectRef]
