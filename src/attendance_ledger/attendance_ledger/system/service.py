from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.exceptions import StorageUnavailableError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HealthStatus:
    healthy: bool
    db_time: Optional[datetime] = None
    error: Optional[str] = None


class HealthService:
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def check(self) -> HealthStatus:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("SELECT NOW() AS db_time")
                row = fetchone(cur)
        except StorageUnavailableError as err:
            logger.warning("health check failed: %s", err)
            return HealthStatus(healthy=False, error=str(err))
        return HealthStatus(healthy=True, db_time=row["db_time"] if row else None)
