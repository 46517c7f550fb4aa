from typing import Annotated

from fastapi import Path
from pydantic import Field

# largest value an INTEGER column holds on every supported backend
MAX_DB_INT = 2**31 - 1

DbInt = Annotated[int, Field(le=MAX_DB_INT)]
RecordId = Annotated[int, Path(le=MAX_DB_INT)]
