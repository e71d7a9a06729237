import pyarrow as pa
import pydantic
import pytest

from downtimedetector.enum import Downtime
from downtimedetector.models import (
    DOWNTIME_ARROW_TYPE,
    DowntimeSetting,
    from_arrow,
    settings_to_table,
    to_arrow,
    to_arrow_names,
)

# -----------------------------------------------------------------------------
# Pydantic Field Tests
# -----------------------------------------------------------------------------


@pytest.mark.parametrize("value", [Downtime.DURATION_1H, 11, "DURATION_1H"])
def test_setting_accepts_member_code_or_name(value):
    setting = DowntimeSetting(downtime=value)
    assert setting.downtime is Downtime.DURATION_1H


def test_setting_json_uses_canonical_name():
    setting = DowntimeSetting(downtime=Downtime.DURATION_1_5H)
    assert setting.model_dump_json() == '{"downtime":"DURATION_1_5H"}'
    assert setting.model_dump() == {"downtime": Downtime.DURATION_1_5H}


def test_setting_from_json():
    setting = DowntimeSetting.model_validate_json('{"downtime": "DURATION_36H"}')
    assert setting.downtime is Downtime.DURATION_36H


@pytest.mark.parametrize("value", ["DURATION_99H", 25, -1])
def test_setting_rejects_unknown_values(value):
    with pytest.raises(pydantic.ValidationError):
        DowntimeSetting(downtime=value)


# -----------------------------------------------------------------------------
# PyArrow Conversion Tests
# -----------------------------------------------------------------------------


def test_to_arrow_codes():
    column = to_arrow([Downtime.DURATION_30S, "DURATION_1H", 24])
    assert column.type == DOWNTIME_ARROW_TYPE
    assert column.to_pylist() == [0, 11, 24]
    assert from_arrow(column) == [
        Downtime.DURATION_30S,
        Downtime.DURATION_1H,
        Downtime.DURATION_48H,
    ]


def test_to_arrow_names():
    column = to_arrow_names([Downtime.DURATION_2H, Downtime.DURATION_2H, 0])
    assert pa.types.is_dictionary(column.type)
    assert column.dictionary.to_pylist() == ["DURATION_2H", "DURATION_30S"]
    assert from_arrow(column) == [
        Downtime.DURATION_2H,
        Downtime.DURATION_2H,
        Downtime.DURATION_30S,
    ]


def test_from_arrow_chunked():
    chunked = pa.chunked_array([[0, 1], [2]], type=pa.int32())
    assert from_arrow(chunked) == [
        Downtime.DURATION_30S,
        Downtime.DURATION_1M,
        Downtime.DURATION_2M,
    ]


def test_from_arrow_rejects_nulls_and_unknowns():
    with pytest.raises(ValueError, match="null"):
        from_arrow(pa.array([0, None], type=pa.int32()))
    with pytest.raises(ValueError, match="Invalid downtime duration"):
        from_arrow(pa.array([25], type=pa.int32()))
    with pytest.raises(ValueError):
        to_arrow(["DURATION_99H"])


def test_settings_to_table():
    table = settings_to_table(
        [
            DowntimeSetting(downtime="DURATION_5M"),
            DowntimeSetting(downtime=Downtime.DURATION_24H),
        ]
    )
    assert table.schema == DowntimeSetting.pyarrow_schema()
    assert table.column("downtime").to_pylist() == [5, 22]
    assert from_arrow(table.column("downtime")) == [
        Downtime.DURATION_5M,
        Downtime.DURATION_24H,
    ]
