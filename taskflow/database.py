# taskflow/database.py

import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from dotenv import load_dotenv

# .env sits at the project root, next to .env.example
load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), "..", ".env"))

# No DATABASE_URL -> local SQLite file
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./taskflow.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

# SQLite connections are shared across the threadpool FastAPI runs sync routes in
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, connect_args=connect_args, echo=SQL_ECHO)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db(drop: bool = False) -> None:
    """Create the users/passwords tables; ``drop`` empties them first."""
    # register the tables on Base.metadata
    from taskflow.models import user  # noqa: F401

    if drop:
        Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
