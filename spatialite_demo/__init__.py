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
SpatiaLite Demo

Two runnable examples on top of SQLite with the SpatiaLite extension:

1. Create a database with a registered POINT geometry column and seed it
2. Import a polygon shapefile and run point-in-polygon lookups against it

To add a new example:
1. Create a new file in spatialite_demo/examples/
2. Subclass SpatialiteExample from spatialite_demo.example_base
3. Implement example_id, description and run()
4. Register it in spatialite_demo/examples/__init__.py
"""

from spatialite_demo.engine import SpatialiteEngine
from spatialite_demo.errors import SpatialiteDemoError
from spatialite_demo.example_base import SpatialiteExample
from spatialite_demo.examples import EXAMPLES, get_example

__all__ = [
    "SpatialiteEngine",
    "SpatialiteDemoError",
    "SpatialiteExample",
    "EXAMPLES",
    "get_example",
]
