from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from money_reminders.core.config import settings


def _build_engine(url: str):
    if url.startswith("sqlite"):
        # In-memory databases live inside a single connection, so share it
        pool_kwargs = {"poolclass": StaticPool} if url in ("sqlite://", "sqlite:///:memory:") else {}
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            echo=False,
            **pool_kwargs,
        )
    # PostgreSQL configuration with connection pooling
    return create_engine(
        url,
        pool_size=5,
        max_overflow=10,
        pool_recycle=300,      # Recycle connections every 5 minutes
        pool_pre_ping=True,    # Validate connections before use
        pool_timeout=30,
        echo=False,            # Set to True for SQL logging
    )


engine = _build_engine(settings.SQLALCHEMY_DATABASE_URI)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
