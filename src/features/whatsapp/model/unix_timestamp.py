from typing import Annotated

from pydantic import BeforeValidator

# Upstream sends Unix seconds either as a string or as a number
UnixTimestamp = Annotated[str, BeforeValidator(lambda value: "" if value is None else str(value))]
