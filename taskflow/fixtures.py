# taskflow/fixtures.py
"""Hard-coded demo data served in place of real project/task tables.

Only users are persisted. The records below are validated once at import and
handed out as deep copies, so a request that edits what it receives never
changes what the next request sees.
"""

from typing import List

from taskflow.schemas.gantt_schema import GanttProject
from taskflow.schemas.kanban_schema import Board
from taskflow.schemas.project_schema import ProjectRead
from taskflow.schemas.task_schema import TaskRead


_PROJECTS = [
    ProjectRead.model_validate(p)
    for p in [
        {
            "id": "1",
            "name": "Projet Marketing Q2",
            "description": "Campagne marketing pour le deuxième trimestre 2025",
            "status": "En cours",
            "start_date": "2025-04-01",
            "end_date": "2025-06-30",
            "progress": 35,
            "members": [
                {"id": "user1", "email": "marketing@example.com", "role": "Chef de projet"},
                {"id": "user2", "email": "designer@example.com", "role": "Designer"},
            ],
            "tasks_count": {"total": 12, "completed": 4},
        },
        {
            "id": "2",
            "name": "Refonte Site Web",
            "description": "Refonte complète du site web corporate",
            "status": "Planifié",
            "start_date": "2025-05-15",
            "end_date": "2025-07-30",
            "progress": 10,
            "members": [
                {"id": "user3", "email": "dev@example.com", "role": "Développeur"},
                {"id": "user4", "email": "pm@example.com", "role": "Chef de projet"},
                {"id": "user5", "email": "designer2@example.com", "role": "Designer UX"},
            ],
            "tasks_count": {"total": 24, "completed": 2},
        },
        {
            "id": "3",
            "name": "Application Mobile",
            "description": "Développement d'une application mobile pour nos clients",
            "status": "En cours",
            "start_date": "2025-03-15",
            "end_date": "2025-08-30",
            "progress": 45,
            "members": [
                {"id": "user3", "email": "dev@example.com", "role": "Développeur"},
                {"id": "user6", "email": "mobile@example.com", "role": "Développeur Mobile"},
                {"id": "user7", "email": "qa@example.com", "role": "Testeur"},
            ],
            "tasks_count": {"total": 36, "completed": 16},
        },
        {
            "id": "4",
            "name": "Intégration CRM",
            "description": "Intégration du nouveau système CRM avec nos outils existants",
            "status": "En attente",
            "start_date": "2025-06-01",
            "end_date": None,
            "progress": 0,
            "members": [
                {"id": "user8", "email": "it@example.com", "role": "Responsable IT"},
            ],
            "tasks_count": {"total": 8, "completed": 0},
        },
    ]
]


_TASKS = [
    TaskRead.model_validate(t)
    for t in [
        {
            "id": "task1",
            "title": "Concevoir la maquette",
            "description": "Créer les maquettes UI/UX pour l'application mobile",
            "priority": "Haute",
            "status": "À faire",
            "due_date": "2025-05-15",
            "project_id": "project1",
            "project_name": "Application Mobile",
            "assignees": [{"id": "user1", "email": "designer@example.com"}],
            "created_at": "2025-05-01T10:00:00Z",
            "updated_at": "2025-05-01T10:00:00Z",
        },
        {
            "id": "task2",
            "title": "Préparer le backlog",
            "description": "Définir les user stories pour le sprint",
            "priority": "Moyenne",
            "status": "En cours",
            "due_date": "2025-05-10",
            "project_id": "project1",
            "project_name": "Application Mobile",
            "assignees": [{"id": "user2", "email": "pm@example.com"}],
            "created_at": "2025-05-02T09:30:00Z",
            "updated_at": "2025-05-03T14:20:00Z",
        },
        {
            "id": "task3",
            "title": "Développer l'API",
            "description": "Créer les endpoints REST pour l'authentification",
            "priority": "Critique",
            "status": "En cours",
            "due_date": "2025-05-20",
            "project_id": "project2",
            "project_name": "Refonte Site Web",
            "assignees": [
                {"id": "user3", "email": "dev@example.com"},
                {"id": "user4", "email": "backend@example.com"},
            ],
            "created_at": "2025-05-03T11:15:00Z",
            "updated_at": "2025-05-05T16:45:00Z",
        },
        {
            "id": "task4",
            "title": "Configuration du projet",
            "description": "Initialiser le projet et configurer les dépendances",
            "priority": "Haute",
            "status": "Terminé",
            "due_date": "2025-05-05",
            "project_id": "project2",
            "project_name": "Refonte Site Web",
            "assignees": [{"id": "user3", "email": "dev@example.com"}],
            "created_at": "2025-04-28T08:00:00Z",
            "updated_at": "2025-05-01T17:30:00Z",
        },
        {
            "id": "task5",
            "title": "Analyse de la concurrence",
            "description": "Étudier les solutions concurrentes et identifier les opportunités",
            "priority": "Basse",
            "status": "En attente",
            "due_date": "2025-05-30",
            "project_id": "project3",
            "project_name": "Projet Marketing Q2",
            "assignees": [{"id": "user5", "email": "marketing@example.com"}],
            "created_at": "2025-05-04T13:20:00Z",
            "updated_at": "2025-05-04T13:20:00Z",
        },
        {
            "id": "task6",
            "title": "Préparation des visuels",
            "description": "Créer les visuels pour la campagne marketing",
            "priority": "Moyenne",
            "status": "À faire",
            "due_date": "2025-05-25",
            "project_id": "project3",
            "project_name": "Projet Marketing Q2",
            "assignees": [{"id": "user6", "email": "designer2@example.com"}],
            "created_at": "2025-05-05T09:10:00Z",
            "updated_at": "2025-05-05T09:10:00Z",
        },
    ]
]


_BOARD = Board.model_validate(
    {
        "id": "1",
        "name": "Tableau de développement",
        "columns": [
            {
                "id": "col1",
                "name": "À faire",
                "position": 0,
                "color": "#E5E7EB",
                "tasks": [
                    {
                        "id": "task1",
                        "title": "Concevoir la maquette",
                        "description": "Créer les maquettes UI/UX pour l'application mobile",
                        "priority": "Haute",
                        "status": "À faire",
                        "position": 0,
                        "due_date": "2025-05-15",
                        "assignees": [{"id": "user1", "email": "designer@example.com"}],
                    },
                    {
                        "id": "task2",
                        "title": "Préparer le backlog",
                        "description": "Définir les user stories pour le sprint",
                        "priority": "Moyenne",
                        "status": "À faire",
                        "position": 1,
                        "due_date": "2025-05-10",
                        "assignees": [{"id": "user2", "email": "pm@example.com"}],
                    },
                ],
            },
            {
                "id": "col2",
                "name": "En cours",
                "position": 1,
                "color": "#DBEAFE",
                "tasks": [
                    {
                        "id": "task3",
                        "title": "Développer l'API",
                        "description": "Créer les endpoints REST pour l'authentification",
                        "priority": "Haute",
                        "status": "En cours",
                        "position": 0,
                        "due_date": "2025-05-20",
                        "assignees": [{"id": "user3", "email": "dev@example.com"}],
                    },
                ],
            },
            {
                "id": "col3",
                "name": "Révision",
                "position": 2,
                "color": "#FEF3C7",
                "tasks": [],
            },
            {
                "id": "col4",
                "name": "Terminé",
                "position": 3,
                "color": "#D1FAE5",
                "tasks": [
                    {
                        "id": "task4",
                        "title": "Configuration du projet",
                        "description": "Initialiser le projet et configurer les dépendances",
                        "priority": "Haute",
                        "status": "Terminé",
                        "position": 0,
                        "due_date": "2025-05-05",
                        "assignees": [{"id": "user3", "email": "dev@example.com"}],
                    },
                ],
            },
        ],
    }
)


_GANTT_PROJECT = GanttProject.model_validate(
    {
        "id": "1",
        "name": "Refonte Site Web",
        "tasks": [
            {
                "id": "task1",
                "name": "Analyse des besoins",
                "start": "2025-05-01",
                "end": "2025-05-10",
                "progress": 100,
                "assignees": ["user1"],
                "color": "#4F46E5",
            },
            {
                "id": "task2",
                "name": "Conception UX/UI",
                "start": "2025-05-10",
                "end": "2025-05-25",
                "progress": 70,
                "dependencies": ["task1"],
                "assignees": ["user2"],
                "color": "#8B5CF6",
            },
            {
                "id": "task3",
                "name": "Développement Frontend",
                "start": "2025-05-20",
                "end": "2025-06-10",
                "progress": 30,
                "dependencies": ["task2"],
                "assignees": ["user3", "user4"],
                "color": "#EC4899",
            },
            {
                "id": "task4",
                "name": "Développement Backend",
                "start": "2025-05-20",
                "end": "2025-06-15",
                "progress": 20,
                "dependencies": ["task2"],
                "assignees": ["user5"],
                "color": "#10B981",
            },
            {
                "id": "task5",
                "name": "Tests et QA",
                "start": "2025-06-10",
                "end": "2025-06-25",
                "progress": 0,
                "dependencies": ["task3", "task4"],
                "assignees": ["user6"],
                "color": "#F59E0B",
            },
            {
                "id": "task6",
                "name": "Déploiement",
                "start": "2025-06-25",
                "end": "2025-06-30",
                "progress": 0,
                "dependencies": ["task5"],
                "assignees": ["user3", "user5"],
                "color": "#EF4444",
            },
        ],
    }
)


def get_projects() -> List[ProjectRead]:
    return [p.model_copy(deep=True) for p in _PROJECTS]


def get_tasks() -> List[TaskRead]:
    return [t.model_copy(deep=True) for t in _TASKS]


def get_board() -> Board:
    return _BOARD.model_copy(deep=True)


def get_gantt_project() -> GanttProject:
    return _GANTT_PROJECT.model_copy(deep=True)
