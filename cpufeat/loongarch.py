"""LoongArch feature detection from cpuinfo."""

from __future__ import annotations

from dataclasses import dataclass

from cpufeat.introspection import (
    CPUINFO_PATH,
    CpuFeature,
    features_from_flags,
    read_cpuinfo,
)
from cpufeat.text import iter_attributes


class LoongArchFeature(CpuFeature):
    """LoongArch features, with their cpuinfo flags."""

    CPUCFG = ("CPUCFG", "cfg")
    LAM = ("LAM", "lam")
    UAL = ("UAL", "ual")
    FPU = ("FPU", "fpu")
    LSX = ("LSX", "lsx")
    LASX = ("LASX", "lasx")
    CRC32 = ("CRC32", "crc32")
    COMPLEX = ("COMPLEX", "complex")
    CRYPTO = ("CRYPTO", "crypto")
    LVZ = ("LVZ", "lvz")
    LBT_X86 = ("LBT_X86", "lbt_x86")
    LBT_ARM = ("LBT_ARM", "lbt_arm")
    LBT_MIPS = ("LBT_MIPS", "lbt_mips")
    PTW = ("PTW", "ptw")


@dataclass(frozen=True)
class LoongArchInfo:
    """Detected LoongArch features."""

    features: frozenset[LoongArchFeature] = frozenset()


def parse_loongarch_cpuinfo(content: str) -> LoongArchInfo:
    """Read the ``Features`` lines of cpuinfo content; the last one wins."""
    features: frozenset[LoongArchFeature] = frozenset()
    for key, value in iter_attributes(content):
        if key == "Features":
            features = features_from_flags(LoongArchFeature, value)
    return LoongArchInfo(features=features)


def get_loongarch_info(path: str = CPUINFO_PATH) -> LoongArchInfo:
    """Detect LoongArch features from the cpuinfo file at ``path``."""
    return parse_loongarch_cpuinfo(read_cpuinfo(path))