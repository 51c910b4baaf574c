from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from jobly.config import build_sqlalchemy_db_url, settings
from jobly.database import get_db, mask_db_url
from jobly.db.executor import Database, DatabaseConnectionError, DatabaseQueryError


router = APIRouter(prefix="/health", tags=["health"])


class HealthStatus(BaseModel):
    status: str
    timestamp: datetime


class DBHealthStatus(BaseModel):
    database: str
    dialect: str
    db_url: str
    timestamp: datetime


@router.get("/", response_model=HealthStatus, summary="API heartbeat")
def health_check() -> HealthStatus:
    return HealthStatus(status="ok", timestamp=datetime.now(timezone.utc))


@router.get("/db", response_model=DBHealthStatus, summary="DB connectivity check")
def db_health_check(db: Database = Depends(get_db)) -> DBHealthStatus:
    now = datetime.now(timezone.utc)

    db_status = "ok"
    try:
        db.query_one("SELECT 1 AS ok")
    except (DatabaseConnectionError, DatabaseQueryError):
        db_status = "error"

    return DBHealthStatus(
        database=db_status,
        dialect=db.engine.dialect.name,
        db_url=mask_db_url(build_sqlalchemy_db_url(settings)),
        timestamp=now,
    )
