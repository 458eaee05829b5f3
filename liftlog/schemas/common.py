from typing import Annotated
from pydantic import Field

# Columns are 32-bit INTEGER on Postgres; anything larger never reaches the driver
MAX_INT = 2**31 - 1

Id = Annotated[int, Field(ge=1, le=MAX_INT)]
