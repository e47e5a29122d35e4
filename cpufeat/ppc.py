"""PowerPC feature names and platform strings from cpuinfo."""

from __future__ import annotations

from dataclasses import dataclass, replace

from cpufeat.introspection import CPUINFO_PATH, CpuFeature, read_cpuinfo
from cpufeat.text import copy_string, has_word, iter_attributes

PLATFORM_SIZE = 64


class PPCFeature(CpuFeature):
    """PowerPC features, with their cpuinfo flags."""

    PPC32 = ("ppc32", "ppc32")
    PPC64 = ("ppc64", "ppc64")
    PPC601 = ("ppc601", "ppc601")
    ALTIVEC = ("altivec", "altivec")
    FPU = ("fpu", "fpu")
    MMU = ("mmu", "mmu")
    MAC_4XX = ("mac_4xx", "4xxmac")
    UNIFIED_CACHE = ("unifiedcache", "ucache")
    SPE = ("spe", "spe")
    EFP_SINGLE = ("efpsingle", "efpsingle")
    EFP_DOUBLE = ("efpdouble", "efpdouble")
    NO_TB = ("no_tb", "notb")
    POWER4 = ("power4", "power4")
    POWER5 = ("power5", "power5")
    POWER5_PLUS = ("power5plus", "power5+")
    CELL = ("cell", "cellbe")
    BOOKE = ("booke", "booke")
    SMT = ("smt", "smt")
    ICACHE_SNOOP = ("icachesnoop", "ic_snoop")
    ARCH_2_05 = ("arch205", "arch_2_05")
    PA6T = ("pa6t", "pa6t")
    DFP = ("dfp", "dfp")
    POWER6_EXT = ("power6ext", "power6x")
    ARCH_2_06 = ("arch206", "arch_2_06")
    VSX = ("vsx", "vsx")
    PSERIES_PERFMON_COMPAT = ("pseries_perfmon_compat", "archpmu")
    TRUE_LE = ("truele", "true_le")
    PPC_LE = ("ppcle", "ppcle")
    ARCH_2_07 = ("arch207", "arch_2_07")
    HTM = ("htm", "htm")
    DSCR = ("dscr", "dscr")
    EBB = ("ebb", "ebb")
    ISEL = ("isel", "isel")
    TAR = ("tar", "tar")
    VEC_CRYPTO = ("vcrypto", "vcrypto")
    HTM_NOSC = ("htm_nosc", "htm-nosc")
    ARCH_3_00 = ("arch300", "arch_3_00")
    IEEE128 = ("ieee128", "ieee128")
    DARN = ("darn", "darn")
    SCV = ("scv", "scv")
    HTM_NO_SUSPEND = ("htm_no_suspend", "htm-no-suspend")


def _fit(text: str) -> str:
    return copy_string(text, PLATFORM_SIZE)


@dataclass(frozen=True)
class PPCPlatformTypeStrings:
    """Platform and base platform names; each kept to at most 63 characters."""

    platform: str = ""
    base_platform: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "platform", _fit(self.platform))
        object.__setattr__(self, "base_platform", _fit(self.base_platform))


@dataclass(frozen=True)
class PPCPlatformStrings:
    """Descriptive strings of a PowerPC machine; each kept to at most 63 characters."""

    platform: str = ""
    model: str = ""
    machine: str = ""
    cpu: str = ""
    type: PPCPlatformTypeStrings = PPCPlatformTypeStrings()

    def __post_init__(self) -> None:
        for name in ("platform", "model", "machine", "cpu"):
            object.__setattr__(self, name, _fit(getattr(self, name)))


def parse_ppc_cpuinfo(content: str) -> PPCPlatformStrings:
    """Read the platform, model, machine and cpu lines of cpuinfo content."""
    values = {"platform": "", "model": "", "machine": "", "cpu": ""}
    for key, value in iter_attributes(content):
        if has_word(key, "platform", " "):
            values["platform"] = value
        elif key in ("model", "machine", "cpu"):
            values[key] = value
    return PPCPlatformStrings(**values)


def get_ppc_platform_strings(
    path: str = CPUINFO_PATH,
    platform: str | None = None,
    base_platform: str | None = None,
) -> PPCPlatformStrings:
    """Read platform strings from the cpuinfo file at ``path``.

    ``platform`` and ``base_platform`` are the auxiliary-vector platform names,
    when known.
    """
    strings = parse_ppc_cpuinfo(read_cpuinfo(path))
    platform_type = strings.type
    if platform is not None:
        platform_type = replace(platform_type, platform=platform)
    if base_platform is not None:
        platform_type = replace(platform_type, base_platform=base_platform)
    return replace(strings, type=platform_type)