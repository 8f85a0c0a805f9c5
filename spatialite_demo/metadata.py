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
Spatial Metadata Probe and Bootstrap

SpatiaLite keeps its catalog (spatial_ref_sys, geometry_columns, ...) as
ordinary tables. InitSpatialMetaData on a database that already has them
is an error or a no-op depending on the library version, so the examples
probe first and only bootstrap a fresh database.
"""

import logging

from spatialite_demo.engine import SpatialiteEngine
from spatialite_demo.errors import BootstrapError, ProbeError

logger = logging.getLogger(__name__)

SPATIAL_REF_SYS = "spatial_ref_sys"


def table_exists(engine: SpatialiteEngine, table: str) -> bool:
    """Return whether sqlite_master lists a table with this name.

    Raises:
        ProbeError: If the catalog query fails
    """
    row = engine.query_one(
        "SELECT name FROM sqlite_master WHERE type = ? AND name = ?",
        ("table", table),
        error=ProbeError,
        action=f"Error checking if {table} table exists",
    )
    return row is not None


def spatial_metadata_exists(engine: SpatialiteEngine) -> bool:
    """Return whether the spatial_ref_sys table exists in the database."""
    return table_exists(engine, SPATIAL_REF_SYS)


def ensure_spatial_metadata(engine: SpatialiteEngine) -> bool:
    """Create the spatial catalog unless it is already present.

    Returns:
        True if the catalog was created by this call

    Raises:
        ProbeError: If the probe fails
        BootstrapError: If InitSpatialMetaData fails
    """
    if spatial_metadata_exists(engine):
        logger.debug("Spatial metadata already present")
        return False

    logger.info("Initializing Spatialite...")
    # 1 = run the whole initialization inside a single transaction
    row = engine.query_one(
        "SELECT InitSpatialMetaData(1)",
        error=BootstrapError,
        action="Error initializing Spatialite",
    )
    if row is None or row[0] != "1":
        raise BootstrapError("Error initializing Spatialite: InitSpatialMetaData returned failure")
    return True


def geometry_column_registered(engine: SpatialiteEngine, table: str, column: str) -> bool:
    """Return whether geometry_columns lists table.column.

    SpatiaLite stores both names lowercased in the catalog.
    """
    row = engine.query_one(
        "SELECT srid FROM geometry_columns "
        "WHERE f_table_name = ? AND f_geometry_column = ?",
        (table.lower(), column.lower()),
        error=ProbeError,
        action=f"Error checking geometry column {table}.{column}",
    )
    return row is not None
