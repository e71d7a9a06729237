"""
PyArrow conversions for `Downtime` columns.

Columns carry the integer code (`int32`, the wire type of the enum). A
dictionary-encoded column of canonical names is available for human-facing
exports; both forms are accepted back by `from_arrow`.
"""

from typing import Any, Iterable, List, Sequence, Union

import pyarrow as pa

from downtimedetector.enum import Downtime

from .downtime_field import DowntimeSetting

DOWNTIME_ARROW_TYPE = pa.int32()

_ArrowColumn = Union[pa.Array, pa.ChunkedArray]


def to_arrow(values: Iterable[Any]) -> pa.Array:
    """
    Builds an `int32` column of codes.

    Raises:
        ValueError: If a value is not a known code or canonical name.
    """
    return pa.array(
        [int(Downtime.parse(value)) for value in values], type=DOWNTIME_ARROW_TYPE
    )


def to_arrow_names(values: Iterable[Any]) -> pa.DictionaryArray:
    """
    Builds a dictionary-encoded column of canonical names.

    Raises:
        ValueError: If a value is not a known code or canonical name.
    """
    names = pa.array([Downtime.parse(value).name for value in values], type=pa.string())
    return names.dictionary_encode()


def from_arrow(column: _ArrowColumn) -> List[Downtime]:
    """
    Decodes a column produced by `to_arrow` or `to_arrow_names`.

    Integer and string columns (plain or dictionary-encoded) are accepted.

    Raises:
        ValueError: If the column holds nulls or unknown entries.
    """
    if isinstance(column, pa.ChunkedArray):
        column = column.combine_chunks()
    if pa.types.is_dictionary(column.type):
        column = column.dictionary_decode()
    if column.null_count:
        raise ValueError(f"Downtime column contains {column.null_count} null(s).")

    return [Downtime.parse(value) for value in column.to_pylist()]


def settings_to_table(settings: Sequence[DowntimeSetting]) -> pa.Table:
    """
    Packs a batch of `DowntimeSetting` records into a table with the model schema.
    """
    return pa.Table.from_pylist(
        [setting.to_arrow_row() for setting in settings],
        schema=DowntimeSetting.pyarrow_schema(),
    )
