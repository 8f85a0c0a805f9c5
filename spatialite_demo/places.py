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
Place fixtures used by the examples.

Coordinates are WGS-84 (SRID 4326), longitude first, in decimal degrees.
"""

from dataclasses import dataclass
from typing import Optional

WGS84_SRID = 4326

NOT_FOUND = "Not found"


@dataclass(frozen=True)
class Place:
    """A labelled point.

    Attributes:
        label: Human-readable name, used only for output
        wkt: WKT POINT literal, e.g. "POINT(-43.1729 -22.9068)"
    """

    label: str
    wkt: str


@dataclass
class LookupResult:
    """Outcome of one point-in-polygon lookup.

    Attributes:
        place: The place that was looked up
        state: NM_UF of the containing polygon, or None when nothing matched
    """

    place: Place
    state: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.state is not None

    def format(self) -> str:
        return f"{self.place.label} ---> {self.state if self.found else NOT_FOUND}"


# Tourist places in Brazil, inserted by the seeding example
BRAZIL_TOURIST_PLACES: tuple[Place, ...] = (
    Place("Rio de Janeiro", "POINT(-43.1729 -22.9068)"),
    Place("Foz do Iguacu", "POINT(-54.5854 -25.5165)"),
    Place("Fernando de Noronha", "POINT(-32.423786 -3.853808)"),
)

# Lookup targets: the Brazilian places plus two that lie outside Brazil
LOOKUP_PLACES: tuple[Place, ...] = BRAZIL_TOURIST_PLACES + (
    Place("Null Island", "POINT(0 0)"),
    Place("New York", "POINT(-74.0060 40.7128)"),
)
