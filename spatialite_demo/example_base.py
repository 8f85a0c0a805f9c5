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
Abstract Base Class for Demo Examples

Every example follows the same lifecycle, driven by execute():

    1. prepare()                      process-level setup, before any connection
    2. open a SpatialiteEngine        on the requested database path
    3. ensure_spatial_metadata()      probe, and bootstrap a fresh database
    4. run(engine)                    the example's own statements
    5. close the engine               always, through the context manager

To implement a new example:

    from spatialite_demo.example_base import SpatialiteExample

    class MyExample(SpatialiteExample):
        '''Count the registered reference systems.'''

        @property
        def example_id(self) -> int:
            return 3

        @property
        def description(self) -> str:
            return "Count spatial reference systems"

        def run(self, engine: SpatialiteEngine) -> None:
            row = engine.query_one("SELECT COUNT(*) FROM spatial_ref_sys")
            print(f"{row[0]} reference systems")

then register it in spatialite_demo/examples/__init__.py.
"""

import logging
from abc import ABC, abstractmethod

from spatialite_demo.engine import MEMORY_DATABASE, SpatialiteEngine
from spatialite_demo.errors import SpatialiteDemoError
from spatialite_demo.metadata import ensure_spatial_metadata

logger = logging.getLogger(__name__)


class SpatialiteExample(ABC):
    """Abstract base class for the runnable examples."""

    @property
    @abstractmethod
    def example_id(self) -> int:
        """Return the integer selected with --example-id."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Return a one-line description for --list-examples."""
        pass

    @abstractmethod
    def run(self, engine: SpatialiteEngine) -> None:
        """Run the example's statements against an open, bootstrapped engine.

        Raises:
            SpatialiteDemoError: On any engine failure
        """
        pass

    def prepare(self) -> None:
        """Optional process-level setup, run before the database is opened."""
        pass

    def execute(self, db_name: str = MEMORY_DATABASE) -> int:
        """Run the full example lifecycle and return a process exit code.

        Returns:
            0 on success, 1 on any SpatialiteDemoError
        """
        try:
            self.prepare()
            with SpatialiteEngine(db_name) as engine:
                ensure_spatial_metadata(engine)
                self.run(engine)
        except SpatialiteDemoError as e:
            logger.error(f"Error: {e}")
            return e.exit_code

        print(f"Example {self.example_id} Done.")
        return 0
