# backend/database/session.py
import os

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import URL
from sqlalchemy.orm import declarative_base, sessionmaker

from config.settings import get_settings

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL")

if not DATABASE_URL:
    DB_HOST = os.getenv("DB_HOST", "").strip()
    DB_NAME = os.getenv("DB_NAME", "").strip()
    DB_USER = os.getenv("DB_USER", "").strip()
    DB_PASSWORD = os.getenv("DB_PASSWORD", "").strip()
    DB_PORT = os.getenv("DB_PORT", "5432").strip()

    if not all([DB_HOST, DB_NAME, DB_USER, DB_PASSWORD]):
        raise RuntimeError("Missing DB env vars (DATABASE_URL or DB_HOST/DB_NAME/DB_USER/DB_PASSWORD).")

    # managed Postgres requires TLS
    DATABASE_URL = URL.create(
        "postgresql+psycopg2",
        username=DB_USER,
        password=DB_PASSWORD,
        host=DB_HOST,
        port=int(DB_PORT),
        database=DB_NAME,
        query={"sslmode": "require"},
    )

Base = declarative_base()


def build_engine(url, echo: bool = False):
    connect_args = {}
    if str(url).startswith("sqlite"):
        # sessions are handed to worker threads
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=echo, pool_pre_ping=True, future=True, connect_args=connect_args)


engine = build_engine(DATABASE_URL, echo=get_settings().sql_echo)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True, expire_on_commit=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
