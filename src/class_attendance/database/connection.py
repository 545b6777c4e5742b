from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import mysql.connector
from mysql.connector import errors, pooling

logger = logging.getLogger(__name__)


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = 5

    @classmethod
    def from_dict(cls, db_config: dict, *, pool_size: int = 5) -> "DBConfig":
        return cls(
            host=str(db_config["host"]),
            port=int(db_config.get("port", 3306)),
            user=str(db_config["user"]),
            password=str(db_config["password"]),
            database=str(db_config["database"]),
            pool_size=int(pool_size),
        )


class DatabaseConnection:
    """Store client with an explicit lifecycle.

    One instance is built at startup and handed to every repository; ``open()``
    creates the connection pool and ``close()`` releases it at shutdown.
    When every pooled connection is checked out, ``connect()`` falls back to a
    short-lived connection instead of failing the request.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._pool: Optional[pooling.MySQLConnectionPool] = None

    @property
    def is_open(self) -> bool:
        return self._pool is not None

    def _connect_args(self) -> dict:
        return dict(
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
            database=self._config.database,
        )

    def open(self) -> "DatabaseConnection":
        if self._pool is None:
            self._pool = pooling.MySQLConnectionPool(
                pool_name=f"class_attendance_{self._config.database}",
                pool_size=self._config.pool_size,
                **self._connect_args(),
            )
            logger.info(
                "Opened connection pool to %s@%s:%s/%s (size=%s)",
                self._config.user,
                self._config.host,
                self._config.port,
                self._config.database,
                self._config.pool_size,
            )
        return self

    def close(self) -> None:
        if self._pool is None:
            return
        pool, self._pool = self._pool, None
        # disconnects every idle connection still queued in the pool
        released = pool._remove_connections()
        logger.info("Closed connection pool to %s (%s idle connections released)", self._config.database, released)

    def connect(self):
        if self._pool is None:
            raise RuntimeError("Database connection is not open")
        try:
            return self._pool.get_connection()
        except errors.PoolError:
            logger.debug("Connection pool exhausted; opening a short-lived connection")
            return mysql.connector.connect(**self._connect_args())
