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
Sample Shapefile Writer

Writes a tiny stand-in for the IBGE BR_UF_2022 dataset: one coarse
rectangle per state that contains one of the tourist places, with the same
NM_UF attribute the lookup example reads. Good enough to run example 2
without downloading the real boundaries; not good enough for anything else.

Requirements:
    - geopandas
    - shapely
"""

import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

# (NM_UF, SIGLA_UF, (min_lon, min_lat, max_lon, max_lat))
SAMPLE_STATES = [
    ("Rio de Janeiro", "RJ", (-44.9, -23.4, -40.9, -20.7)),
    ("Paraná", "PR", (-54.7, -26.8, -48.0, -22.5)),
    # Stretched east to take in the Fernando de Noronha archipelago
    ("Pernambuco", "PE", (-41.4, -9.5, -32.3, -3.7)),
]


def write_sample_states(base_path: Union[str, Path]) -> Path:
    """Write the sample states shapefile.

    Args:
        base_path: Output path without extension; .shp, .shx, .dbf, .prj
            and .cpg files are written next to it

    Returns:
        Path of the written .shp file

    Raises:
        ImportError: If geopandas or shapely is not installed
    """
    try:
        import geopandas as gpd
        from shapely.geometry import box
    except ImportError as e:
        raise ImportError(
            "GeoPandas and Shapely are required to write sample data. "
            "Install them with: pip install geopandas shapely"
        ) from e

    shp_path = Path(f"{base_path}.shp")
    shp_path.parent.mkdir(parents=True, exist_ok=True)

    frame = gpd.GeoDataFrame(
        {
            "NM_UF": [name for name, _, _ in SAMPLE_STATES],
            "SIGLA_UF": [code for _, code, _ in SAMPLE_STATES],
        },
        geometry=[box(*bounds) for _, _, bounds in SAMPLE_STATES],
        crs="EPSG:4326",
    )
    frame.to_file(shp_path, driver="ESRI Shapefile", encoding="UTF-8")

    logger.info(f"Wrote {len(frame)} sample states to {shp_path}")
    return shp_path
