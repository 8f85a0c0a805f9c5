#!/usr/bin/env python3
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

import argparse
import logging
from pathlib import Path

from spatialite_demo.sample_data import write_sample_states


def main():
    # Writes <output-dir>/BR_UF_2022.* so example 2 can be run from a sibling directory

    parser = argparse.ArgumentParser(description="Write a sample Brazilian states shapefile")
    parser.add_argument("--output-dir", type=Path, default=Path("shp"),
                        help="Directory for the shapefile (default: shp)")
    parser.add_argument("--name", type=str, default="BR_UF_2022",
                        help="Shapefile base name, without extension (default: BR_UF_2022)")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    shp_path = write_sample_states(args.output_dir / args.name)
    print(f"Sample shapefile written to {shp_path}")


if __name__ == "__main__":
    main()
