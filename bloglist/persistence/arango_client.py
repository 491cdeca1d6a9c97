"""ArangoDB connection for Bloglist.

create_arango_client() opens the database and hands back a SafeDatabase.
python-arango pools HTTP connections per client; one client per process.
"""

from __future__ import annotations

from typing import Any

from arango import ArangoClient
from arango.aql import AQL
from arango.collection import StandardCollection
from arango.database import StandardDatabase

# Bind variables must be plain JSON. Lists and tuples pass as lists, dicts
# recurse, and anything else (dataclass DTOs included) is refused so that a
# service cannot leak an object into a query by accident.
_BIND_SCALARS = (str, int, float, bool, type(None))


def _sanitize_bind_value(value: Any, *, _path: str = "$") -> Any:
    """Return ``value`` as JSON-ready data for AQL bind_vars.

    Raises:
        TypeError: Naming the offending location, e.g. ``$.fields.likes``
    """
    if isinstance(value, _BIND_SCALARS):
        return value
    if isinstance(value, dict):
        return {str(key): _sanitize_bind_value(item, _path=f"{_path}.{key}") for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [_sanitize_bind_value(item, _path=f"{_path}[{index}]") for index, item in enumerate(value)]

    raise TypeError(
        f"Bind value at {_path} has type {type(value).__name__}, which AQL cannot take; "
        f"pass plain fields instead."
    )


class _SafeAQL:
    """AQL executor that sanitizes bind_vars on every query."""

    def __init__(self, aql: AQL) -> None:
        self._aql = aql

    def execute(self, query: str, bind_vars: dict[str, Any] | None = None, **kwargs: Any) -> Any:
        return self._aql.execute(query, bind_vars=_sanitize_bind_value(bind_vars or {}), **kwargs)

    def __getattr__(self, name: str) -> Any:
        return getattr(self._aql, name)


class SafeDatabase:
    """StandardDatabase proxy whose ``aql`` sanitizes bind_vars.

    Holds the owning client so close() can release its connection pool.
    """

    def __init__(self, db: StandardDatabase, client: ArangoClient | None = None) -> None:
        self._db = db
        self._client = client
        self._aql = _SafeAQL(db.aql)

    @property
    def aql(self) -> _SafeAQL:
        return self._aql

    def collection(self, name: str) -> StandardCollection:
        return self._db.collection(name)  # type: ignore[return-value]

    def close(self) -> None:
        if self._client is not None:
            self._client.close()

    def __getattr__(self, name: str) -> Any:
        return getattr(self._db, name)


DatabaseLike = StandardDatabase | SafeDatabase


def create_arango_client(
    hosts: str = "http://localhost:8529",
    username: str = "root",
    password: str = "",
    db_name: str = "bloglist",
) -> SafeDatabase:
    """Open ``db_name`` on the given ArangoDB server.

    The database must exist already. Collections and indexes come from
    components.platform.arango_bootstrap_comp.ensure_schema().

    Raises:
        ServerConnectionError: If the server cannot be reached
    """
    client = ArangoClient(hosts=hosts)
    return SafeDatabase(client.db(db_name, username=username, password=password), client=client)
