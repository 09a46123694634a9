# taskflow/schemas/project_schema.py

from enum import Enum
from typing import List, Optional
from datetime import date

from pydantic import BaseModel


class ProjectStatus(str, Enum):
    IN_PROGRESS = "En cours"
    PLANNED = "Planifié"
    DONE = "Terminé"
    ON_HOLD = "En attente"
    CANCELLED = "Annulé"


# --------- Nested ---------
class ProjectMember(BaseModel):
    id: str
    email: str
    role: str


class TasksCount(BaseModel):
    total: int = 0
    completed: int = 0


# --------- For reading a project (GET responses) ---------
class ProjectRead(BaseModel):
    id: str
    name: str
    description: str
    status: ProjectStatus
    start_date: date
    end_date: Optional[date] = None
    progress: int = 0
    members: List[ProjectMember] = []
    tasks_count: TasksCount = TasksCount()


class ProjectSummary(BaseModel):
    id: str
    name: str
    status: ProjectStatus


class ProjectList(BaseModel):
    projects: List[ProjectRead]
    statuses: List[ProjectStatus]
