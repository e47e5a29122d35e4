"""32-bit ARM feature detection from cpuinfo."""

from __future__ import annotations

from dataclasses import dataclass, replace
from itertools import takewhile

from cpufeat.introspection import (
    CPUINFO_PATH,
    CpuFeature,
    features_from_flags,
    read_cpuinfo,
)
from cpufeat.text import index_of, iter_attributes, parse_positive_number

_DIGITS = frozenset("0123456789")


class ArmFeature(CpuFeature):
    """ARM features, with their cpuinfo flags."""

    SWP = ("swp", "swp")
    HALF = ("half", "half")
    THUMB = ("thumb", "thumb")
    BIT26 = ("_26bit", "26bit")
    FASTMULT = ("fastmult", "fastmult")
    FPA = ("fpa", "fpa")
    VFP = ("vfp", "vfp")
    EDSP = ("edsp", "edsp")
    JAVA = ("java", "java")
    IWMMXT = ("iwmmxt", "iwmmxt")
    CRUNCH = ("crunch", "crunch")
    THUMBEE = ("thumbee", "thumbee")
    NEON = ("neon", "neon")
    VFPV3 = ("vfpv3", "vfpv3")
    VFPV3D16 = ("vfpv3d16", "vfpv3d16")
    TLS = ("tls", "tls")
    VFPV4 = ("vfpv4", "vfpv4")
    IDIVA = ("idiva", "idiva")
    IDIVT = ("idivt", "idivt")
    VFPD32 = ("vfpd32", "vfpd32")
    LPAE = ("lpae", "lpae")
    EVTSTRM = ("evtstrm", "evtstrm")
    AES = ("aes", "aes")
    PMULL = ("pmull", "pmull")
    SHA1 = ("sha1", "sha1")
    SHA2 = ("sha2", "sha2")
    CRC32 = ("crc32", "crc32")


@dataclass(frozen=True)
class ArmInfo:
    """Identification and features of an ARM processor.

    Numeric fields hold -1 when cpuinfo reported a value that could not be parsed.
    """

    implementer: int = 0
    variant: int = 0
    part: int = 0
    revision: int = 0
    architecture: int = 0
    features: frozenset[ArmFeature] = frozenset()


_NUMBER_KEYS = {
    "CPU implementer": "implementer",
    "CPU variant": "variant",
    "CPU part": "part",
    "CPU revision": "revision",
}


def _bits(value: int, msb: int, lsb: int) -> int:
    return (value >> lsb) & ((1 << (msb - lsb + 1)) - 1)


def get_arm_cpu_id(info: ArmInfo) -> int:
    """Pack implementer, variant, part and revision into a MIDR-like id."""
    return (
        (_bits(info.implementer, 7, 0) << 24)
        | (_bits(info.variant, 3, 0) << 20)
        | (_bits(info.part, 11, 0) << 4)
        | _bits(info.revision, 3, 0)
    )


def _fix_errors(info: ArmInfo, reports_armv6: bool, reports_goldfish: bool) -> ArmInfo:
    features = set(info.features)
    architecture = info.architecture

    # Some Samsung kernels report an invalid architecture.
    if reports_armv6 and architecture >= 7:
        architecture = 6
    info = replace(info, architecture=architecture)

    cpu_id = get_arm_cpu_id(info)
    if cpu_id == 0x4100C080:
        # The Android 4.2 emulator kernel does not report ARM IDIV.
        if architecture >= 7 and reports_goldfish:
            features.add(ArmFeature.IDIVA)
    elif cpu_id == 0x511004D0:
        features.discard(ArmFeature.NEON)

    # Some Qualcomm Krait kernels forget to report IDIV support.
    if info.implementer == 0x51 and architecture == 7 and info.part in (0x4D, 0x6F):
        features.update((ArmFeature.IDIVA, ArmFeature.IDIVT))

    if ArmFeature.VFPV4 in features or ArmFeature.NEON in features:
        features.add(ArmFeature.VFPV3)
    if ArmFeature.VFPV3 in features:
        features.add(ArmFeature.VFP)

    return replace(info, features=frozenset(features))


def parse_arm_cpuinfo(content: str) -> ArmInfo:
    """Read identification and features from cpuinfo content, fixing known kernel bugs."""
    numbers = {field: 0 for field in _NUMBER_KEYS.values()}
    architecture = 0
    features: frozenset[ArmFeature] = frozenset()
    reports_armv6 = False
    reports_goldfish = False

    for key, value in iter_attributes(content):
        if key == "Features":
            features = features_from_flags(ArmFeature, value)
        elif key in _NUMBER_KEYS:
            numbers[_NUMBER_KEYS[key]] = parse_positive_number(value)
        elif key == "CPU architecture":
            # A number possibly followed by letters, such as "6TEJ".
            digits = "".join(takewhile(lambda c: c in _DIGITS, value))
            architecture = parse_positive_number(digits)
        elif key in ("Processor", "model name"):
            reports_armv6 = index_of(value, "(v6l)") >= 0
        elif key == "Hardware":
            reports_goldfish = value == "Goldfish"

    info = ArmInfo(architecture=architecture, features=features, **numbers)
    return _fix_errors(info, reports_armv6, reports_goldfish)


def get_arm_info(path: str = CPUINFO_PATH) -> ArmInfo:
    """Detect ARM identification and features from the cpuinfo file at ``path``."""
    return parse_arm_cpuinfo(read_cpuinfo(path))