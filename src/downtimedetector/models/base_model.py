"""
Base Model Module.

This module defines the foundational class for the data models of the SDK.
It bridges Pydantic (runtime validation of config/JSON input) and PyArrow
(columnar transport and storage of enum codes).
"""

import pyarrow as pa
import pydantic


class BaseModel(pydantic.BaseModel):
    """
    The root base class for SDK data models.

    Subclasses declare their columnar layout in `__pyarrow_struct__`, which
    is used to build Arrow schemas for batches of records.
    """

    # Subclasses must override this to define their specific serialization layout.
    __pyarrow_struct__ = pa.struct([])

    @classmethod
    def pyarrow_schema(cls) -> pa.Schema:
        return pa.schema(list(cls.__pyarrow_struct__))
