from .enum_registry import (
    EnumRegistry as EnumRegistry,
    EnumRegistryProtocol as EnumRegistryProtocol,
    EnumTable as EnumTable,
    downtime_table as downtime_table,
    register_downtime as register_downtime,
)

__all__ = [
    "EnumRegistry",
    "EnumRegistryProtocol",
    "EnumTable",
    "downtime_table",
    "register_downtime",
]
