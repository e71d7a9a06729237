from .config import (
    DEFAULT_CONFIG as DEFAULT_CONFIG,
    RegistrationConfig as RegistrationConfig,
)

from .enum import (
    Downtime as Downtime,
    DOWNTIME_NAME as DOWNTIME_NAME,
    DOWNTIME_VALUE as DOWNTIME_VALUE,
    UNKNOWN_NAME_PREFIX as UNKNOWN_NAME_PREFIX,
    code_of as code_of,
    is_known as is_known,
    name_of as name_of,
)

from .registry import (
    EnumRegistry as EnumRegistry,
    EnumRegistryProtocol as EnumRegistryProtocol,
    EnumTable as EnumTable,
    register_downtime as register_downtime,
)

from .wire import (
    WireError as WireError,
    decode_downtime as decode_downtime,
    encode_downtime as encode_downtime,
)

from .models import (
    DowntimeName as DowntimeName,
    DowntimeSetting as DowntimeSetting,
)

# useful to do like: `from downtimedetector import Downtime`
__all__ = [
    "code_of",
    "decode_downtime",
    "DEFAULT_CONFIG",
    "Downtime",
    "DOWNTIME_NAME",
    "DOWNTIME_VALUE",
    "DowntimeName",
    "DowntimeSetting",
    "encode_downtime",
    "EnumRegistry",
    "EnumRegistryProtocol",
    "EnumTable",
    "is_known",
    "name_of",
    "RegistrationConfig",
    "register_downtime",
    "UNKNOWN_NAME_PREFIX",
    "WireError",
]
