from .downtime import (
    Downtime as Downtime,
    DOWNTIME_NAME as DOWNTIME_NAME,
    DOWNTIME_VALUE as DOWNTIME_VALUE,
    UNKNOWN_NAME_PREFIX as UNKNOWN_NAME_PREFIX,
    code_of as code_of,
    is_known as is_known,
    name_of as name_of,
)

__all__ = [
    "Downtime",
    "DOWNTIME_NAME",
    "DOWNTIME_VALUE",
    "UNKNOWN_NAME_PREFIX",
    "code_of",
    "is_known",
    "name_of",
]
