"""
Downtime Duration Module.

Defines the `Downtime` enumeration: the closed set of downtime-duration buckets
(30 seconds up to 48 hours) exchanged by the downtime-detector wire protocol,
together with the code <-> name lookup tables.

The integer codes are part of the wire contract: consumers persist and transmit
the code, never the name, so existing members must never be renumbered.
"""

from enum import IntEnum
from types import MappingProxyType
from typing import Any, Mapping, Tuple

# Prefix of the placeholder returned by `name_of` for codes outside the table.
UNKNOWN_NAME_PREFIX = "UNKNOWN_ENUM_VALUE_Downtime_"


class Downtime(IntEnum):
    """
    Downtime-duration buckets, ordered from the shortest (code 0) to the
    longest (code 24).

    The real-world magnitude of each bucket is only encoded in its name
    (e.g. `DURATION_1_5H` is one hour and a half).
    """

    DURATION_30S = 0
    DURATION_1M = 1
    DURATION_2M = 2
    DURATION_3M = 3
    DURATION_4M = 4
    DURATION_5M = 5
    DURATION_10M = 6
    DURATION_20M = 7
    DURATION_30M = 8
    DURATION_40M = 9
    DURATION_50M = 10
    DURATION_1H = 11
    DURATION_1_5H = 12
    DURATION_2H = 13
    DURATION_2_5H = 14
    DURATION_3H = 15
    DURATION_4H = 16
    DURATION_5H = 17
    DURATION_6H = 18
    DURATION_9H = 19
    DURATION_12H = 20
    DURATION_18H = 21
    DURATION_24H = 22
    DURATION_36H = 23
    DURATION_48H = 24

    def __str__(self) -> str:
        return self.name

    @classmethod
    def parse(cls, value: Any) -> "Downtime":
        """
        Strict conversion of a user/config value into a `Downtime` member.

        Args:
            value: A `Downtime`, an integer code or a canonical name (e.g. "DURATION_1H").

        Returns:
            Downtime: The matching member.

        Raises:
            ValueError: If the value is not a known code or canonical name.
        """
        if isinstance(value, cls):
            return value
        if is_known(value):
            return cls(value)
        elif isinstance(value, str):
            code, found = code_of(value)
            if found:
                return cls(code)

        raise ValueError(
            f"Invalid downtime duration {value!r}. "
            f"Available names: {list(DOWNTIME_VALUE.keys())}"
        )


# code -> name
DOWNTIME_NAME: Mapping[int, str] = MappingProxyType(
    {member.value: member.name for member in Downtime}
)

# name -> code
DOWNTIME_VALUE: Mapping[str, int] = MappingProxyType(
    {member.name: member.value for member in Downtime}
)


def is_known(code: int) -> bool:
    """Returns True if `code` is one of the enumerated bucket codes."""
    # bool is an int subclass, but `True` is never a meaningful bucket
    if not isinstance(code, int) or isinstance(code, bool):
        return False
    return code in DOWNTIME_NAME


def name_of(code: int) -> str:
    """
    Returns the canonical name of a bucket code.

    Never raises: codes outside the table yield a deterministic placeholder
    ending with the given value, e.g. `name_of(25)` ->
    "UNKNOWN_ENUM_VALUE_Downtime_25". This keeps the function usable when
    logging values decoded from an untrusted peer.
    """
    if not is_known(code):
        return f"{UNKNOWN_NAME_PREFIX}{code}"
    return DOWNTIME_NAME[code]


def code_of(name: str) -> Tuple[int, bool]:
    """
    Reverse lookup: returns `(code, found)` for a canonical name.

    Unknown names return `(0, False)`; the code is meaningless in that case
    and the caller decides how to handle the miss.
    """
    code = DOWNTIME_VALUE.get(name)
    if code is None:
        return 0, False
    return code, True
