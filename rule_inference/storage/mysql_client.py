# ==============================================
# MySQLClient
# ==============================================
#
# PURPOSE:
#   Manages the MySQL connection and the read-only queries the
#   statistical analyzer and the inference service issue against
#   live tables.
#
# CLASS: MySQLClient
# ------------------
#   Stateful - holds connection to MySQL.
#
#   Constructor:
#   ------------
#   - __init__(host, port, user, password, database)
#       Store connection params. Don't connect yet.
#
#   Methods:
#   --------
#   - connect() -> None / disconnect() -> None
#
#   - ping() -> None
#       Round-trip to the server. Raises DataStoreError when unreachable.
#
#   - count_nulls(table, column) -> int
#       SELECT COUNT(*) ... WHERE column IS NULL
#
#   - fetch_values(table, column, limit, distinct=False) -> list
#       Bounded fetch of non-null values of one column.
#
#   - min_max(table, column) -> (min, max)
#       One MIN/MAX aggregate over the full column.
#
#   - distinct_values(table, column) -> list
#       Every distinct non-null value of the column.
#
#   All driver errors are re-raised as DataStoreError.
#
#   Context Manager:
#   ----------------
#   - __enter__ / __exit__ for `with MySQLClient(...) as db:` usage.
#
# ==============================================

from typing import Any, List, Optional, Tuple, cast
import pymysql
import pymysql.cursors

from .errors import DataStoreError


def quote_identifier(name: str) -> str:
    # Backticks inside an identifier are escaped by doubling them
    return "`" + name.replace("`", "``") + "`"


class MySQLClient:
    def __init__(self, host, port, user, password, database):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.database = database
        self.connection = None

    def connect(self) -> None:
        # Establish connection to MySQL
        try:
            self.connection = pymysql.connect(
                host=self.host,
                port=self.port,
                user=self.user,
                password=self.password,
                database=self.database,
                cursorclass=pymysql.cursors.DictCursor,
            )
        except pymysql.MySQLError as e:
            raise DataStoreError(
                f"Could not connect to MySQL at {self.host}:{self.port}: {e}"
            ) from e

    def disconnect(self) -> None:
        # Close connection cleanly
        if self.connection:
            self.connection.close()
            self.connection = None

    def ping(self) -> None:
        self._fetch_all("SELECT 1 AS ok")

    def count_nulls(self, table: str, column: str) -> int:
        rows = self._fetch_all(
            f"SELECT COUNT(*) AS count FROM {quote_identifier(table)} "
            f"WHERE {quote_identifier(column)} IS NULL"
        )
        return int(rows[0]["count"]) if rows else 0

    def fetch_values(self, table: str, column: str, limit: int, distinct: bool = False) -> List[Any]:
        col = quote_identifier(column)
        select = "SELECT DISTINCT" if distinct else "SELECT"
        rows = self._fetch_all(
            f"{select} {col} AS value FROM {quote_identifier(table)} "
            f"WHERE {col} IS NOT NULL LIMIT %s",
            (limit,)
        )
        return [row["value"] for row in rows]

    def min_max(self, table: str, column: str) -> Tuple[Any, Any]:
        col = quote_identifier(column)
        rows = self._fetch_all(
            f"SELECT MIN({col}) AS min_value, MAX({col}) AS max_value "
            f"FROM {quote_identifier(table)}"
        )
        if not rows:
            return None, None
        return rows[0]["min_value"], rows[0]["max_value"]

    def distinct_values(self, table: str, column: str) -> List[Any]:
        col = quote_identifier(column)
        rows = self._fetch_all(
            f"SELECT DISTINCT {col} AS value FROM {quote_identifier(table)} "
            f"WHERE {col} IS NOT NULL"
        )
        return [row["value"] for row in rows]

    def _fetch_all(self, query: str, params: Optional[tuple] = None) -> List[dict]:
        # Execute SELECT and return rows as dicts
        if self.connection is None:
            raise DataStoreError("Not connected to MySQL")
        try:
            with self.connection.cursor(pymysql.cursors.DictCursor) as cursor:
                if params is not None:
                    cursor.execute(query, params)
                else:
                    cursor.execute(query)
                return cast(List[dict], list(cursor.fetchall()))
        except pymysql.MySQLError as e:
            raise DataStoreError(f"MySQL query failed: {e}") from e

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()
