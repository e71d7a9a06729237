"""
Pydantic integration of the `Downtime` enum.

`DowntimeName` is the field type to use in configuration and JSON models:
input may be a member, an integer code or a canonical name, while JSON
output always carries the canonical name (e.g. "DURATION_1H").
"""

from typing import Annotated

import pyarrow as pa
from pydantic import BeforeValidator, PlainSerializer

from downtimedetector.enum import Downtime

from .base_model import BaseModel

DowntimeName = Annotated[
    Downtime,
    BeforeValidator(Downtime.parse),
    PlainSerializer(lambda value: value.name, return_type=str, when_used="json"),
]


class DowntimeSetting(BaseModel):
    """
    A single downtime bucket selection, as read from a config file.

    Attributes:
        downtime (Downtime): The selected bucket.
    """

    __pyarrow_struct__ = pa.struct(
        [
            pa.field("downtime", pa.int32(), nullable=False),
        ]
    )

    downtime: DowntimeName

    def to_arrow_row(self) -> dict:
        """Returns the record as a row matching `__pyarrow_struct__`."""
        return {"downtime": int(self.downtime)}
