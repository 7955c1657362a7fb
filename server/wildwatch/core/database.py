import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from .config import settings

logger = logging.getLogger("db")


def _engine_kwargs(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True, "pool_size": 20, "max_overflow": 10}
    kwargs = {"connect_args": {"check_same_thread": False}}
    # in-memory SQLite only lives as long as its single connection
    if url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return kwargs


engine = create_engine(settings.DATABASE_URL, **_engine_kwargs(settings.DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def init_db():
    # 테이블 생성을 위해 모델을 먼저 로드
    from wildwatch.models.all_models import Incident  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("✅ Tables checked/created.")

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
