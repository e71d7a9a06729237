from .base_model import BaseModel as BaseModel
from .downtime_field import (
    DowntimeName as DowntimeName,
    DowntimeSetting as DowntimeSetting,
)
from .arrow import (
    DOWNTIME_ARROW_TYPE as DOWNTIME_ARROW_TYPE,
    from_arrow as from_arrow,
    settings_to_table as settings_to_table,
    to_arrow as to_arrow,
    to_arrow_names as to_arrow_names,
)

__all__ = [
    "BaseModel",
    "DOWNTIME_ARROW_TYPE",
    "DowntimeName",
    "DowntimeSetting",
    "from_arrow",
    "settings_to_table",
    "to_arrow",
    "to_arrow_names",
]
