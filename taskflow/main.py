# taskflow/main.py

import logging
import os

from dotenv import load_dotenv
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

# ---------------- ENV ----------------
load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), "..", ".env"))

# ---------------- LOGGING ----------------
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger("taskflow")

app = FastAPI(title="TaskFlow Pro")

# ---------------- CORS ----------------
origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

frontend_origin = os.getenv("FRONTEND_ORIGIN")
if frontend_origin:
    origins.append(frontend_origin)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------- DATABASE INIT ----------------
from taskflow.database import init_db  # noqa: E402
from taskflow.models.user import User  # noqa: E402

logger.info("Checking database models...")
init_db()
logger.info("Database ready.")

# ---------------- ROUTERS ----------------
from taskflow.auth.auth_router import router as auth_router  # noqa: E402
from taskflow.auth.session import get_user  # noqa: E402
from taskflow.gantt.gantt_router import router as gantt_router  # noqa: E402
from taskflow.kanban.kanban_router import router as kanban_router  # noqa: E402
from taskflow.project.project_router import router as project_router  # noqa: E402
from taskflow.task.task_router import router as task_router  # noqa: E402

app.include_router(auth_router)
app.include_router(project_router)
app.include_router(task_router)
app.include_router(kanban_router)
app.include_router(gantt_router)


# ---------------- HOME ----------------
@app.get("/")
def read_root(user: User = Depends(get_user)):
    return {
        "name": "TaskFlow Pro",
        "tagline": "Gestion de projets avancée",
        "user": user.email if user else None,
    }
