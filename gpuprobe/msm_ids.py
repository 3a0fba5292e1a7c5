"""Marketing names of Qualcomm Adreno (MSM) GPUs, keyed by chip id."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping


def chip_id(core_id: int) -> int:
    """Encode a three-digit Adreno core number as a chip id.

    The hundreds, tens and units digits go in bits 24, 16 and 8.
    """
    hundreds, rest = divmod(core_id, 100)
    tens, units = divmod(rest, 10)
    return (hundreds << 24) | (tens << 16) | (units << 8)


_CORES = (
    # Adreno 2xx
    200, 201, 205, 220,
    # Adreno 3xx
    305, 307, 320, 330,
    # Adreno 4xx
    405, 420, 430,
    # Adreno 5xx
    508, 509, 510, 512, 530, 540,
    # Adreno 6xx
    615, 616, 618, 619, 620, 630, 640, 650, 660, 680, 690,
    # Adreno 7xx
    730, 740,
)

_MISC = (
    (0x00BE06030500, "Adreno 8c Gen 3"),
    (0x007506030500, "Adreno 7c+ Gen 3"),
    (0x006006030500, "Adreno 7c+ Gen 3 Lite"),
)


def _build_table() -> Mapping[int, str]:
    table: dict[int, str] = {}
    entries = [(chip_id(core), f"Adreno {core}") for core in _CORES] + list(_MISC)
    for gpu_id, name in entries:
        table.setdefault(gpu_id, name)
    return MappingProxyType(table)


MSM_IDS: Mapping[int, str] = _build_table()


def msm_parse_marketing_name(gpu_id: int) -> str | None:
    """Return the marketing name of an MSM GPU id, or None if unknown."""
    return MSM_IDS.get(gpu_id)