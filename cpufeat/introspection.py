"""Shared machinery for per-architecture feature enumerations."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from cpufeat.text import has_word

UNKNOWN_FEATURE = "unknown_feature"
CPUINFO_PATH = "/proc/cpuinfo"

F = TypeVar("F", bound="CpuFeature")


class CpuFeature(Enum):
    """Base for feature enumerations: each member has a name and a cpuinfo flag."""

    def __init__(self, feature_name: str, cpuinfo_flag: str) -> None:
        self.feature_name = feature_name
        self.cpuinfo_flag = cpuinfo_flag


def feature_name(feature: object) -> str:
    """Return the feature's name, or ``"unknown_feature"`` for anything else."""
    if isinstance(feature, CpuFeature):
        return feature.feature_name
    return UNKNOWN_FEATURE


def features_from_flags(feature_cls: type[F], flags: str) -> frozenset[F]:
    """Return the members of ``feature_cls`` whose flag is a word of ``flags``."""
    return frozenset(
        member for member in feature_cls if has_word(flags, member.cpuinfo_flag, " ")
    )


def read_cpuinfo(path: str = CPUINFO_PATH) -> str:
    """Return the content of a cpuinfo file, or an empty string if unreadable."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except OSError:
        return ""