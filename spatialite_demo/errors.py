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
Error Taxonomy

Every failure the demo driver can surface is a SpatialiteDemoError. The
adapter raises the generic kinds (OpenError, ExecError, PrepareError); the
examples ask for a more specific kind at each call site so the log line
says which step failed.
"""


class SpatialiteDemoError(Exception):
    """Base class for all demo failures. Always maps to exit code 1."""

    exit_code = 1


class OpenError(SpatialiteDemoError):
    """The database could not be opened or the extension could not be loaded."""


class ExecError(SpatialiteDemoError):
    """A statement without row output failed."""


class PrepareError(SpatialiteDemoError):
    """A query could not be prepared or stepped."""


class ProbeError(PrepareError):
    """The master catalog introspection query failed."""


class QueryError(PrepareError):
    """A lookup SELECT failed."""


class BootstrapError(ExecError):
    """InitSpatialMetaData failed."""


class SchemaError(ExecError):
    """CREATE TABLE or AddGeometryColumn failed."""


class TxError(ExecError):
    """BEGIN, a row INSERT, or COMMIT failed."""


class ShapefileImportError(ExecError):
    """ImportSHP failed (missing file, permissions, security mode)."""


class CliError(SpatialiteDemoError):
    """Bad command line: unknown example id or an unexpected argument."""
