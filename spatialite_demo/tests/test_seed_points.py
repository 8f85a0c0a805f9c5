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
Integration tests for example 1 (seeding a points table).

These tests verify:
1. In-memory and file-backed runs succeed and report completion
2. The geometry column is registered as POINT / 4326 / XY
3. Re-running against the same file appends the same rows again
4. A failing insert leaves no rows from that run behind

Note: These tests require the mod_spatialite library.
"""

import pytest

from spatialite_demo.engine import SpatialiteEngine, spatialite_available
from spatialite_demo.examples.seed_points import SeedPointsExample
from spatialite_demo.places import BRAZIL_TOURIST_PLACES, Place

pytestmark = pytest.mark.skipif(
    not spatialite_available(), reason="SpatiaLite extension not available"
)

EXPECTED_COORDS = [
    (-43.1729, -22.9068),
    (-54.5854, -25.5165),
    (-32.423786, -3.853808),
]


def count_points(path):
    with SpatialiteEngine(str(path)) as engine:
        row = engine.query_one("SELECT COUNT(*) FROM points")
    return int(row[0])


class TestSeedPointsProperties:
    """Tests for SeedPointsExample property values."""

    def test_example_id_is_1(self):
        """Example id is 1."""
        assert SeedPointsExample().example_id == 1

    def test_default_places(self):
        """The default fixtures are the three tourist places."""
        assert SeedPointsExample().places == BRAZIL_TOURIST_PLACES


class TestSeedPointsRun:
    """Tests for running the seeding example."""

    def test_in_memory_run(self, capsys):
        """An in-memory run succeeds and prints the completion line."""
        code = SeedPointsExample().execute()

        assert code == 0
        assert "Example 1 Done." in capsys.readouterr().out

    def test_file_backed_run_inserts_places(self, tmp_path):
        """A file-backed run leaves the three places in insertion order."""
        path = tmp_path / "t.db"

        assert SeedPointsExample().execute(str(path)) == 0

        assert path.exists()
        with SpatialiteEngine(str(path)) as engine:
            rows = engine._conn.execute(
                "SELECT ST_X(geom), ST_Y(geom), ST_SRID(geom) FROM points ORDER BY id"
            ).fetchall()

        assert len(rows) == 3
        for (x, y, srid), (lon, lat) in zip(rows, EXPECTED_COORDS):
            assert x == pytest.approx(lon)
            assert y == pytest.approx(lat)
            assert srid == 4326

    def test_geometry_column_registered(self, tmp_path):
        """points.geom is registered as a 2D POINT column in SRID 4326."""
        path = tmp_path / "t.db"
        SeedPointsExample().execute(str(path))

        with SpatialiteEngine(str(path)) as engine:
            row = engine.query_one(
                "SELECT srid, geometry_type, coord_dimension FROM geometry_columns "
                "WHERE f_table_name = 'points' AND f_geometry_column = 'geom'"
            )

        # geometry_type 1 = POINT, coord_dimension 2 = XY
        assert row == ("4326", "1", "2")

    def test_rerun_appends_same_rows(self, tmp_path):
        """Running twice against one file succeeds both times and doubles the rows."""
        path = tmp_path / "t.db"

        assert SeedPointsExample().execute(str(path)) == 0
        assert count_points(path) == 3
        assert SeedPointsExample().execute(str(path)) == 0
        assert count_points(path) == 6


class TestSeedPointsFailures:
    """Tests for transactional behaviour on failure."""

    BAD_PLACES = BRAZIL_TOURIST_PLACES + (
        # Rejected by the POINT-only geometry constraint trigger
        Place("Not a point", "LINESTRING(0 0, 1 1)"),
    )

    def test_failed_insert_on_fresh_db_leaves_no_rows(self, tmp_path, caplog):
        """A rejected row discards the rows inserted before it."""
        path = tmp_path / "t.db"

        code = SeedPointsExample(places=self.BAD_PLACES).execute(str(path))

        assert code == 1
        assert "Error adding Not a point" in caplog.text
        assert count_points(path) == 0

    def test_failed_insert_keeps_earlier_runs(self, tmp_path):
        """A failed run leaves rows committed by earlier runs untouched."""
        path = tmp_path / "t.db"
        SeedPointsExample().execute(str(path))

        code = SeedPointsExample(places=self.BAD_PLACES).execute(str(path))

        assert code == 1
        assert count_points(path) == 3

    def test_unopenable_path_fails(self, tmp_path, capsys):
        """A database path in a missing directory returns 1."""
        code = SeedPointsExample().execute(str(tmp_path / "missing" / "t.db"))

        assert code == 1
        assert "Done." not in capsys.readouterr().out
