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
Example 2: import a polygon shapefile and find which polygon holds each point.

ImportSHP reads from the filesystem, which SpatiaLite refuses unless the
SPATIALITE_SECURITY environment variable is "relaxed" when the connection
is opened. This example sets it in prepare(); the setting stays in the
process environment afterwards.
"""

import logging
import os
from typing import Optional

from spatialite_demo.engine import SpatialiteEngine
from spatialite_demo.errors import QueryError, ShapefileImportError
from spatialite_demo.example_base import SpatialiteExample
from spatialite_demo.metadata import table_exists
from spatialite_demo.places import LOOKUP_PLACES, WGS84_SRID, LookupResult, Place

logger = logging.getLogger(__name__)

# Brazilian federative units (IBGE 2022). No extension: ImportSHP adds its own.
DEFAULT_SHAPEFILE_PATH = "../shp/BR_UF_2022"
LOCATION_TABLE = "location"
SHAPEFILE_CHARSET = "UTF-8"
STATE_NAME_COLUMN = "NM_UF"


class ShapefileLookupExample(SpatialiteExample):
    """Import BR_UF_2022 into a location table and run point-in-polygon lookups.

    Attributes:
        shapefile_path: Shapefile base path, without the .shp suffix
        places: Places looked up, in output order
        results: Lookup results from the last run
    """

    def __init__(
        self,
        shapefile_path: str = DEFAULT_SHAPEFILE_PATH,
        places: tuple[Place, ...] = LOOKUP_PLACES,
    ) -> None:
        self.shapefile_path = shapefile_path
        self.places = places
        self.results: list[LookupResult] = []

    @property
    def example_id(self) -> int:
        return 2

    @property
    def description(self) -> str:
        return "Import a shapefile of Brazilian states and look up points in it"

    def prepare(self) -> None:
        logger.debug("Setting SPATIALITE_SECURITY=relaxed to allow ImportSHP")
        os.environ["SPATIALITE_SECURITY"] = "relaxed"

    def run(self, engine: SpatialiteEngine) -> None:
        self.import_shapefile(engine)

        logger.info("Checking what are the corresponding State names for the following points:")
        self.results = []
        for place in self.places:
            result = LookupResult(place=place, state=self.lookup(engine, place))
            self.results.append(result)
            print(result.format())

    def import_shapefile(self, engine: SpatialiteEngine) -> None:
        """Load the shapefile into LOCATION_TABLE unless it is already there.

        Raises:
            ShapefileImportError: If ImportSHP fails or imports nothing
        """
        if table_exists(engine, LOCATION_TABLE):
            logger.info(f"Table {LOCATION_TABLE} already exists, skipping import")
            return

        logger.info(f"Importing shapefile: {self.shapefile_path}")
        row = engine.query_one(
            "SELECT ImportSHP(?, ?, ?)",
            (self.shapefile_path, LOCATION_TABLE, SHAPEFILE_CHARSET),
            error=ShapefileImportError,
            action="Error importing shapefile",
        )

        imported = row[0] if row else None
        if imported is None or int(imported) <= 0:
            raise ShapefileImportError(
                f"Error importing shapefile: ImportSHP loaded no rows from "
                f"{self.shapefile_path} (missing file, or SPATIALITE_SECURITY not relaxed?)"
            )
        logger.info(f"Imported {imported} rows into {LOCATION_TABLE}")

    def lookup(self, engine: SpatialiteEngine, place: Place) -> Optional[str]:
        """Return the state name whose polygon contains the place, if any.

        Raises:
            QueryError: If the lookup cannot be prepared
        """
        row = engine.query_one(
            f"SELECT {STATE_NAME_COLUMN} FROM {LOCATION_TABLE} "
            "WHERE ST_Within(GeomFromText(?, ?), geometry) = 1",
            (place.wkt, WGS84_SRID),
            error=QueryError,
            action="Error preparing statement",
        )
        return row[0] if row else None
