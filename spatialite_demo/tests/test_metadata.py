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
Tests for the spatial metadata probe and bootstrap.

These tests verify:
1. The probe reports a fresh database as lacking spatial metadata
2. Bootstrap creates spatial_ref_sys once and is skipped afterwards
3. Probe failures surface as ProbeError
"""

from unittest.mock import MagicMock

import pytest

from spatialite_demo.engine import SpatialiteEngine, spatialite_available
from spatialite_demo.errors import BootstrapError, ProbeError
from spatialite_demo.metadata import (
    ensure_spatial_metadata,
    geometry_column_registered,
    spatial_metadata_exists,
    table_exists,
)


class TestMetadataProbeUnit:
    """Tests for the probe with a stubbed engine."""

    def test_probe_queries_sqlite_master(self):
        """The probe asks sqlite_master for a table named spatial_ref_sys."""
        engine = MagicMock()
        engine.query_one.return_value = ("spatial_ref_sys",)

        assert spatial_metadata_exists(engine) is True

        sql, params = engine.query_one.call_args[0]
        assert "sqlite_master" in sql
        assert params == ("table", "spatial_ref_sys")
        assert engine.query_one.call_args[1]["error"] is ProbeError

    def test_probe_false_on_no_row(self):
        """No row from the catalog means no spatial metadata."""
        engine = MagicMock()
        engine.query_one.return_value = None

        assert spatial_metadata_exists(engine) is False

    def test_bootstrap_skipped_when_present(self):
        """InitSpatialMetaData is not called when the catalog exists."""
        engine = MagicMock()
        engine.query_one.return_value = ("spatial_ref_sys",)

        assert ensure_spatial_metadata(engine) is False
        assert engine.query_one.call_count == 1

    def test_bootstrap_failure_result_raises(self):
        """InitSpatialMetaData returning 0 is a BootstrapError."""
        engine = MagicMock()
        engine.query_one.side_effect = [None, ("0",)]

        with pytest.raises(BootstrapError, match="Error initializing Spatialite"):
            ensure_spatial_metadata(engine)


@pytest.mark.skipif(not spatialite_available(), reason="SpatiaLite extension not available")
class TestMetadataProbeLive:
    """Tests against a real SpatiaLite database."""

    def test_fresh_memory_database_has_no_metadata(self):
        """A new in-memory database has no spatial_ref_sys table."""
        with SpatialiteEngine() as engine:
            assert spatial_metadata_exists(engine) is False

    def test_bootstrap_creates_metadata(self):
        """ensure_spatial_metadata() creates the catalog on a fresh database."""
        with SpatialiteEngine() as engine:
            assert ensure_spatial_metadata(engine) is True
            assert spatial_metadata_exists(engine) is True
            assert table_exists(engine, "geometry_columns") is True

    def test_bootstrap_is_idempotent(self, tmp_path):
        """A second bootstrap on the same file is skipped."""
        path = str(tmp_path / "meta.db")

        with SpatialiteEngine(path) as engine:
            assert ensure_spatial_metadata(engine) is True

        with SpatialiteEngine(path) as engine:
            assert ensure_spatial_metadata(engine) is False
            row = engine.query_one("SELECT COUNT(*) FROM spatial_ref_sys WHERE srid = 4326")

        assert row == ("1",)

    def test_geometry_column_registration_lookup(self):
        """geometry_column_registered() follows AddGeometryColumn."""
        with SpatialiteEngine() as engine:
            ensure_spatial_metadata(engine)
            engine.execute("CREATE TABLE museums (id INTEGER PRIMARY KEY)")
            assert geometry_column_registered(engine, "museums", "geom") is False

            engine.execute("SELECT AddGeometryColumn('museums', 'geom', 4326, 'POINT', 'XY')")

            assert geometry_column_registered(engine, "museums", "geom") is True
            assert geometry_column_registered(engine, "MUSEUMS", "GEOM") is True

    def test_geometry_column_probe_without_catalog_fails(self):
        """Probing geometry_columns before bootstrap raises ProbeError."""
        with SpatialiteEngine() as engine:
            with pytest.raises(ProbeError):
                geometry_column_registered(engine, "points", "geom")
