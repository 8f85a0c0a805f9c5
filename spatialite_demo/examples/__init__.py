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
Example Registry

Maps --example-id values to example implementations. To add an example,
import it here and add it to the EXAMPLES dictionary.
"""

from typing import Type

from spatialite_demo.errors import CliError
from spatialite_demo.example_base import SpatialiteExample
from spatialite_demo.examples.seed_points import SeedPointsExample
from spatialite_demo.examples.shapefile_lookup import ShapefileLookupExample

# Key: value of --example-id
# Value: Example class
EXAMPLES: dict[int, Type[SpatialiteExample]] = {
    1: SeedPointsExample,
    2: ShapefileLookupExample,
}


def get_example(example_id: int) -> SpatialiteExample:
    """Get an instance of the example with this id.

    Raises:
        CliError: If no example has this id
    """
    if example_id not in EXAMPLES:
        raise CliError(f"Unknown example ID: {example_id}")

    return EXAMPLES[example_id]()


def list_examples() -> list[int]:
    """Return the registered example ids in ascending order."""
    return sorted(EXAMPLES.keys())


__all__ = [
    "EXAMPLES",
    "get_example",
    "list_examples",
    "SeedPointsExample",
    "ShapefileLookupExample",
]
