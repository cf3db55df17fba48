"""
Database initialization script for the remote store.
"""
from drivepay.core.config import settings
from drivepay.db.session import build_engine, init_db

if __name__ == "__main__":
    if not settings.DATABASE_URL:
        raise SystemExit("DATABASE_URL is not set; nothing to initialize.")
    print("Initializing database...")
    init_db(build_engine(settings.DATABASE_URL, echo=settings.DB_ECHO))
    print("Database initialized successfully!")
