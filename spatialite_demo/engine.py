#  Licensed to the Apache Software Foundation (ASF) under one
#  or more contributor license agreements.  See the NOTICE file
#  distributed with this work for additional information
#  regarding copyright ownership.  The ASF licenses this file
#  to you under the Apache License, Version 2.0 (the
#  "License"); you may not use this file except in compliance
#  with the License.  You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing,
#  software distributed under the License is distributed on an
#  "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY
#  KIND, either express or implied.  See the License for the
#  specific language governing permissions and limitations
#  under the License.

"""
SpatiaLite Engine Adapter

Wraps a standard-library sqlite3 connection with the SpatiaLite extension
loaded into it. The adapter owns two resources:

- the sqlite3 connection itself
- an ExtensionContext recording which SpatiaLite library the connection loaded

Both are torn down by close(), which is the only teardown routine. It closes
the connection, then releases the extension context, then runs the
process-wide shutdown hook, in that order, on every exit path.

Example:
    from spatialite_demo.engine import SpatialiteEngine

    with SpatialiteEngine(":memory:") as engine:
        engine.execute("CREATE TABLE t (id INTEGER)")
        row = engine.query_one("SELECT spatialite_version()")
"""

import logging
import os
import sqlite3
from typing import Any, Optional, Sequence

from spatialite_demo.errors import ExecError, OpenError, PrepareError

logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"

# Library names tried in order when SPATIALITE_LIBRARY_PATH is not set
EXTENSION_CANDIDATES = ("mod_spatialite", "libspatialite")

# Library that loaded successfully last time; cleared by shutdown_extension()
_resolved_library: Optional[str] = None


def _candidate_libraries() -> list[str]:
    override = os.environ.get("SPATIALITE_LIBRARY_PATH")
    if override:
        return [override]

    candidates = list(EXTENSION_CANDIDATES)
    if _resolved_library in candidates:
        candidates.remove(_resolved_library)
        candidates.insert(0, _resolved_library)
    return candidates


def shutdown_extension() -> None:
    """Release process-wide extension state held for the current run."""
    global _resolved_library
    logger.debug("Shutting down SpatiaLite extension state")
    _resolved_library = None


def spatialite_available() -> bool:
    """Return whether the SpatiaLite extension can be loaded here."""
    conn = sqlite3.connect(MEMORY_DATABASE)
    try:
        ExtensionContext().register(conn)
        return True
    except OpenError:
        return False
    finally:
        conn.close()


class ExtensionContext:
    """Per-connection SpatiaLite state.

    Attributes:
        library: Name or path of the library loaded into the connection
        released: Whether release() has been called
    """

    def __init__(self) -> None:
        self.library: Optional[str] = None
        self.released: bool = False

    def register(self, conn: sqlite3.Connection) -> None:
        """Load SpatiaLite into an open connection.

        Raises:
            OpenError: If extension loading is unsupported or no candidate loads
        """
        global _resolved_library

        try:
            conn.enable_load_extension(True)
        except AttributeError as e:
            raise OpenError(
                "This Python build cannot load SQLite extensions "
                "(sqlite3 was compiled without extension support)"
            ) from e

        errors = []
        try:
            for library in _candidate_libraries():
                try:
                    conn.load_extension(library)
                except sqlite3.Error as e:
                    logger.debug(f"Could not load '{library}': {e}")
                    errors.append(f"{library}: {e}")
                    continue
                self.library = library
                _resolved_library = library
                logger.debug(f"Loaded SpatiaLite from '{library}'")
                return
        finally:
            conn.enable_load_extension(False)

        raise OpenError(
            "Could not load the SpatiaLite extension ("
            + "; ".join(errors)
            + "). Install mod_spatialite or set SPATIALITE_LIBRARY_PATH."
        )

    def release(self) -> None:
        self.library = None
        self.released = True


class SpatialiteEngine:
    """A SpatiaLite-enabled database handle.

    The typical lifecycle is:
        1. engine = SpatialiteEngine(path)
        2. engine.open()
        3. engine.execute(...) / engine.query_one(...)
        4. engine.close()

    Context manager support opens on entry and closes on exit, including
    when the body raises.

    Attributes:
        path: Filesystem path of the database, or ":memory:"
        _conn: sqlite3 connection (None until opened, and after close)
        _context: Extension context registered with the connection
    """

    def __init__(self, path: str = MEMORY_DATABASE) -> None:
        self.path = path
        self._conn: Optional[sqlite3.Connection] = None
        self._context: Optional[ExtensionContext] = None
        self._closed: bool = False

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def open(self) -> "SpatialiteEngine":
        """Open the database read-write, creating it if absent, and load SpatiaLite.

        Raises:
            OpenError: If the database cannot be opened or SpatiaLite cannot be loaded
        """
        if self._conn is not None:
            return self

        logger.info(f"Opening database: {self.path}")
        self._closed = False
        try:
            # Autocommit: BEGIN/COMMIT are issued explicitly by callers
            self._conn = sqlite3.connect(self.path, isolation_level=None)
        except sqlite3.Error as e:
            self.close()
            raise OpenError(f"Error opening database {self.path}: {e}") from e

        self._context = ExtensionContext()
        try:
            self._context.register(self._conn)
        except OpenError:
            self.close()
            raise

        return self

    def _require_conn(self, error: type) -> sqlite3.Connection:
        if self._conn is None:
            raise error("Connection not established. Call open() first.")
        return self._conn

    def execute(
        self,
        sql: str,
        params: Sequence[Any] = (),
        error: type = ExecError,
        action: str = "Error executing statement",
    ) -> None:
        """Execute one statement with no row output.

        Any rows the statement yields (e.g. from a SELECT of a spatial
        function) are stepped through and discarded.

        Args:
            sql: A single SQL statement, with ? placeholders
            params: Values bound to the placeholders
            error: ExecError subclass raised on failure
            action: Prefix for the error message

        Raises:
            error: If the engine rejects the statement
        """
        conn = self._require_conn(error)
        logger.debug(f"exec: {sql} {tuple(params)}")
        try:
            cursor = conn.execute(sql, params)
            cursor.fetchall()
            cursor.close()
        except sqlite3.Error as e:
            raise error(f"{action}: {e}") from e

    def query_one(
        self,
        sql: str,
        params: Sequence[Any] = (),
        error: type = PrepareError,
        action: str = "Error preparing statement",
    ) -> Optional[tuple[Optional[str], ...]]:
        """Step a query once and return its first row as text.

        Returns:
            Column values of the first row converted to str (NULL stays None),
            or None if the query produced no row

        Raises:
            error: If the query cannot be prepared or stepped
        """
        conn = self._require_conn(error)
        logger.debug(f"query: {sql} {tuple(params)}")
        try:
            cursor = conn.execute(sql, params)
            row = cursor.fetchone()
            cursor.close()
        except sqlite3.Error as e:
            raise error(f"{action}: {e}") from e

        if row is None:
            return None
        return tuple(None if value is None else str(value) for value in row)

    def get_version(self) -> str:
        """Return SQLite and SpatiaLite version strings."""
        spatialite = "unknown"
        if self._conn is not None:
            try:
                row = self.query_one("SELECT spatialite_version()")
                if row and row[0]:
                    spatialite = row[0]
            except PrepareError:
                pass
        return f"SQLite {sqlite3.sqlite_version}, SpatiaLite {spatialite}"

    def close(self) -> None:
        """Close the connection, release the extension context, shut down.

        Safe to call more than once; only the first call after open() does
        anything. A close failure is logged and teardown continues.
        """
        if self._closed:
            return
        self._closed = True

        if self._conn is not None:
            logger.debug(f"Closing database: {self.path}")
            try:
                self._conn.close()
            except sqlite3.Error as e:
                logger.error(f"Error closing database: {e}")
            self._conn = None

        if self._context is not None:
            self._context.release()
            self._context = None

        shutdown_extension()

    def __enter__(self) -> "SpatialiteEngine":
        return self.open()

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
