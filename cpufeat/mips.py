"""MIPS feature detection from cpuinfo."""

from __future__ import annotations

from dataclasses import dataclass

from cpufeat.introspection import (
    CPUINFO_PATH,
    CpuFeature,
    features_from_flags,
    read_cpuinfo,
)
from cpufeat.text import iter_attributes


class MipsFeature(CpuFeature):
    """MIPS features, with their cpuinfo flags."""

    MSA = ("msa", "msa")  # MIPS SIMD Architecture
    EVA = ("eva", "eva")  # Enhanced Virtual Addressing
    R6 = ("r6", "r6")  # Release 6 of the processor
    MIPS16 = ("mips16", "mips16")  # Compressed instructions
    MDMX = ("mdmx", "mdmx")  # MIPS Digital Media Extension
    MIPS3D = ("mips3d", "mips3d")  # 3D graphics acceleration
    SMART = ("smart", "smartmips")  # Smart-card cryptography
    DSP = ("dsp", "dsp")  # Digital Signal Processing


@dataclass(frozen=True)
class MipsInfo:
    """Detected MIPS features."""

    features: frozenset[MipsFeature] = frozenset()


def parse_mips_cpuinfo(content: str) -> MipsInfo:
    """Read the ``ASEs implemented`` line of cpuinfo content."""
    features: frozenset[MipsFeature] = frozenset()
    for key, value in iter_attributes(content):
        if key == "ASEs implemented":
            features = features_from_flags(MipsFeature, value)
    return MipsInfo(features=features)


def get_mips_info(path: str = CPUINFO_PATH) -> MipsInfo:
    """Detect MIPS features from the cpuinfo file at ``path``."""
    return parse_mips_cpuinfo(read_cpuinfo(path))