"""Field types shared by the command schemas."""

from typing import Annotated

from pydantic import Field

# SQLite INTEGER is a signed 64-bit value
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

SqliteInt = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]
