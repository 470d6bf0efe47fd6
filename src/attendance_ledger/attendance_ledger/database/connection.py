from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass

import mysql.connector
from mysql.connector import errors

from ..core.exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = 0
    connection_timeout: int = 5

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "attendance_db")),
            pool_size=int(db_config.get("pool_size", 0)),
            connection_timeout=int(db_config.get("connection_timeout", 5)),
        )

    def describe(self) -> str:
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


class DatabaseConnection:
    """DB connection factory bound to one DBConfig.

    Note: Every operation borrows a short-lived connection and returns it when done.
    With ``pool_size > 0`` connections come from a mysql-connector pool whose name
    is derived from the whole target (host, port, user, database).
    """

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def pool_name(self) -> str:
        digest = hashlib.sha1(self._config.describe().encode("utf-8")).hexdigest()[:12]
        return f"attendance_ledger_{digest}"

    @property
    def config(self) -> DBConfig:
        return self._config

    def connect(self):
        kwargs = dict(
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
            database=self._config.database,
            connection_timeout=int(self._config.connection_timeout),
        )
        if self._config.pool_size > 0:
            kwargs["pool_name"] = self.pool_name
            kwargs["pool_size"] = int(self._config.pool_size)

        try:
            return mysql.connector.connect(**kwargs)
        except errors.Error as err:
            logger.warning("database connect failed (%s): %s", self._config.describe(), err)
            raise StorageUnavailableError("Database is unavailable") from err
