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
Example 1: create a SpatiaLite database and seed it with tourist places.

Creates a points table, registers a POINT geometry column on it through
AddGeometryColumn, and inserts the BRAZIL_TOURIST_PLACES fixtures inside a
single transaction so SQLite syncs once instead of once per row.
"""

import logging

from spatialite_demo.engine import SpatialiteEngine
from spatialite_demo.errors import SchemaError, TxError
from spatialite_demo.example_base import SpatialiteExample
from spatialite_demo.metadata import geometry_column_registered
from spatialite_demo.places import BRAZIL_TOURIST_PLACES, WGS84_SRID, Place

logger = logging.getLogger(__name__)

POINTS_TABLE = "points"
GEOMETRY_COLUMN = "geom"


class SeedPointsExample(SpatialiteExample):
    """Seed a points table with a fixed list of places.

    Attributes:
        places: Places inserted, in order, on every run
    """

    def __init__(self, places: tuple[Place, ...] = BRAZIL_TOURIST_PLACES) -> None:
        self.places = places

    @property
    def example_id(self) -> int:
        return 1

    @property
    def description(self) -> str:
        return "Create a points table and add tourist places in Brazil"

    def run(self, engine: SpatialiteEngine) -> None:
        logger.info(engine.get_version())

        self.create_table(engine)
        self.add_geometry_column(engine)
        self.insert_places(engine)

    def create_table(self, engine: SpatialiteEngine) -> None:
        logger.info(f"Creating table: {POINTS_TABLE}")
        # The geometry column is added separately so SpatiaLite registers it
        engine.execute(
            f"CREATE TABLE IF NOT EXISTS {POINTS_TABLE} "
            "(id INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL)",
            error=SchemaError,
            action="Error creating table",
        )

    def add_geometry_column(self, engine: SpatialiteEngine) -> None:
        """Register points.geom as a 2D WGS-84 POINT column.

        AddGeometryColumn fails on a column that already exists, so a
        column left by a previous run is kept as is.
        """
        if geometry_column_registered(engine, POINTS_TABLE, GEOMETRY_COLUMN):
            logger.info(
                f"Geometry column {POINTS_TABLE}.{GEOMETRY_COLUMN} already registered"
            )
            return

        logger.info(f"Adding geometry column to table: {POINTS_TABLE}")
        row = engine.query_one(
            "SELECT AddGeometryColumn(?, ?, ?, ?, ?)",
            (POINTS_TABLE, GEOMETRY_COLUMN, WGS84_SRID, "POINT", "XY"),
            error=SchemaError,
            action="Error adding geometry column",
        )
        if row is None or row[0] != "1":
            raise SchemaError(
                f"Error adding geometry column: AddGeometryColumn rejected "
                f"{POINTS_TABLE}.{GEOMETRY_COLUMN}"
            )

    def insert_places(self, engine: SpatialiteEngine) -> None:
        """Insert every place inside one transaction.

        On failure nothing is rolled back explicitly; closing the connection
        discards the open transaction.
        """
        logger.info("Adding some tourist places in Brazil...")
        engine.execute("BEGIN TRANSACTION", error=TxError, action="Error starting transaction")

        for place in self.places:
            logger.info(f"Adding {place.label}: {place.wkt}")
            engine.execute(
                f"INSERT INTO {POINTS_TABLE} ({GEOMETRY_COLUMN}) "
                "VALUES (GeomFromText(?, ?))",
                (place.wkt, WGS84_SRID),
                error=TxError,
                action=f"Error adding {place.label}",
            )

        logger.info("Committing transaction...")
        engine.execute("COMMIT", error=TxError, action="Error committing transaction")
