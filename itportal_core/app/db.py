import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base

load_dotenv()

logger = logging.getLogger(__name__)

# Prefer explicit DATABASE_URL, then the hosted Postgres URL. If neither is
# provided, fall back to a local SQLite file in a `data/` folder adjacent to
# the package directory.
env_db = os.getenv("DATABASE_URL") or os.getenv("SUPABASE_DB_URL")
if env_db:
    DATABASE_URL = env_db
else:
    pkg_root = Path(__file__).resolve().parents[1]
    data_dir = pkg_root / "data"
    try:
        data_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        data_dir = None
    if data_dir:
        db_file = data_dir / "itportal.db"
        DATABASE_URL = f"sqlite:///{db_file.as_posix()}"
    else:
        DATABASE_URL = "sqlite:///:memory:"


def engine_options(url: str) -> dict:
    """Keyword arguments for create_engine() matching the target dialect."""
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    options = {
        "pool_size": int(os.getenv("DB_POOL_SIZE", "5")),
        "max_overflow": int(os.getenv("DB_MAX_OVERFLOW", "10")),
        "pool_pre_ping": True,
    }
    sslmode = os.getenv("DB_SSLMODE", "require")
    if sslmode:
        options["connect_args"] = {"sslmode": sslmode}
    return options


logger.info("Using DATABASE_URL: %s", make_url(DATABASE_URL).render_as_string(hide_password=True))

engine = create_engine(DATABASE_URL, **engine_options(DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def create_db_and_tables(bind=None):
    from . import models  # noqa: F401  registers tables on Base.metadata
    Base.metadata.create_all(bind=bind or engine)
