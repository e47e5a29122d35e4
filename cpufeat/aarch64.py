"""AArch64 feature detection from Darwin sysctl values and Windows processor features."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum

from cpufeat.introspection import CpuFeature


class Aarch64Feature(CpuFeature):
    """AArch64 features, with their cpuinfo flags."""

    FP = ("fp", "fp")
    ASIMD = ("asimd", "asimd")
    EVTSTRM = ("evtstrm", "evtstrm")
    AES = ("aes", "aes")
    PMULL = ("pmull", "pmull")
    SHA1 = ("sha1", "sha1")
    SHA2 = ("sha2", "sha2")
    CRC32 = ("crc32", "crc32")
    ATOMICS = ("atomics", "atomics")
    FPHP = ("fphp", "fphp")
    ASIMDHP = ("asimdhp", "asimdhp")
    CPUID = ("cpuid", "cpuid")
    ASIMDRDM = ("asimdrdm", "asimdrdm")
    JSCVT = ("jscvt", "jscvt")
    FCMA = ("fcma", "fcma")
    LRCPC = ("lrcpc", "lrcpc")
    DCPOP = ("dcpop", "dcpop")
    SHA3 = ("sha3", "sha3")
    SM3 = ("sm3", "sm3")
    SM4 = ("sm4", "sm4")
    ASIMDDP = ("asimddp", "asimddp")
    SHA512 = ("sha512", "sha512")
    SVE = ("sve", "sve")
    ASIMDFHM = ("asimdfhm", "asimdfhm")
    DIT = ("dit", "dit")
    USCAT = ("uscat", "uscat")
    ILRCPC = ("ilrcpc", "ilrcpc")
    FLAGM = ("flagm", "flagm")
    SSBS = ("ssbs", "ssbs")
    SB = ("sb", "sb")
    PACA = ("paca", "paca")
    PACG = ("pacg", "pacg")
    DCPODP = ("dcpodp", "dcpodp")
    SVE2 = ("sve2", "sve2")
    SVEAES = ("sveaes", "sveaes")
    SVEPMULL = ("svepmull", "svepmull")
    SVEBITPERM = ("svebitperm", "svebitperm")
    SVESHA3 = ("svesha3", "svesha3")
    SVESM4 = ("svesm4", "svesm4")
    FLAGM2 = ("flagm2", "flagm2")
    FRINT = ("frint", "frint")
    SVEI8MM = ("svei8mm", "svei8mm")
    SVEF32MM = ("svef32mm", "svef32mm")
    SVEF64MM = ("svef64mm", "svef64mm")
    SVEBF16 = ("svebf16", "svebf16")
    I8MM = ("i8mm", "i8mm")
    BF16 = ("bf16", "bf16")
    DGH = ("dgh", "dgh")
    RNG = ("rng", "rng")
    BTI = ("bti", "bti")
    MTE = ("mte", "mte")
    ECV = ("ecv", "ecv")
    AFP = ("afp", "afp")
    RPRES = ("rpres", "rpres")
    MTE3 = ("mte3", "mte3")
    SME = ("sme", "sme")
    SME_I16I64 = ("smei16i64", "smei16i64")
    SME_F64F64 = ("smef64f64", "smef64f64")
    SME_I8I32 = ("smei8i32", "smei8i32")
    SME_F16F32 = ("smef16f32", "smef16f32")
    SME_B16F32 = ("smeb16f32", "smeb16f32")
    SME_F32F32 = ("smef32f32", "smef32f32")
    SME_FA64 = ("smefa64", "smefa64")
    WFXT = ("wfxt", "wfxt")
    EBF16 = ("ebf16", "ebf16")
    SVE_EBF16 = ("sveebf16", "sveebf16")
    CSSC = ("cssc", "cssc")
    RPRFM = ("rprfm", "rprfm")
    SVE2P1 = ("sve2p1", "sve2p1")
    SME2 = ("sme2", "sme2")
    SME2P1 = ("sme2p1", "sme2p1")
    SME_I16I32 = ("smei16i32", "smei16i32")
    SME_BI32I32 = ("smebi32i32", "smebi32i32")
    SME_B16B16 = ("smeb16b16", "smeb16b16")
    SME_F16F16 = ("smef16f16", "smef16f16")


@dataclass(frozen=True)
class Aarch64Info:
    """Identification and features of an AArch64 processor."""

    implementer: int = 0
    variant: int = 0
    part: int = 0
    revision: int = 0
    features: frozenset[Aarch64Feature] = frozenset()


class WindowsProcessorFeature(IntEnum):
    """Processor feature codes understood by ``IsProcessorFeaturePresent``."""

    ARM_VFP_32_REGISTERS_AVAILABLE = 18
    ARM_NEON_INSTRUCTIONS_AVAILABLE = 19
    ARM_V8_CRYPTO_INSTRUCTIONS_AVAILABLE = 30
    ARM_V8_CRC32_INSTRUCTIONS_AVAILABLE = 31
    ARM_V81_ATOMIC_INSTRUCTIONS_AVAILABLE = 34
    ARM_V82_DP_INSTRUCTIONS_AVAILABLE = 43
    ARM_V83_JSCVT_INSTRUCTIONS_AVAILABLE = 44
    ARM_V83_LRCPC_INSTRUCTIONS_AVAILABLE = 45


SYSCTL_IDENTIFICATION = {
    "implementer": "hw.cputype",
    "variant": "hw.cpusubtype",
    "part": "hw.cpufamily",
    "revision": "hw.cpusubfamily",
}

SYSCTL_FEATURES = {
    Aarch64Feature.FP: "hw.optional.floatingpoint",
    Aarch64Feature.ASIMD: "hw.optional.AdvSIMD",
    Aarch64Feature.AES: "hw.optional.arm.FEAT_AES",
    Aarch64Feature.PMULL: "hw.optional.arm.FEAT_PMULL",
    Aarch64Feature.SHA1: "hw.optional.arm.FEAT_SHA1",
    Aarch64Feature.SHA2: "hw.optional.arm.FEAT_SHA256",
    Aarch64Feature.CRC32: "hw.optional.armv8_crc32",
    Aarch64Feature.ATOMICS: "hw.optional.arm.FEAT_LSE",
    Aarch64Feature.FPHP: "hw.optional.arm.FEAT_FP16",
    Aarch64Feature.ASIMDHP: "hw.optional.arm.AdvSIMD_HPFPCvt",
    Aarch64Feature.ASIMDRDM: "hw.optional.arm.FEAT_RDM",
    Aarch64Feature.JSCVT: "hw.optional.arm.FEAT_JSCVT",
    Aarch64Feature.FCMA: "hw.optional.arm.FEAT_FCMA",
    Aarch64Feature.LRCPC: "hw.optional.arm.FEAT_LRCPC",
    Aarch64Feature.DCPOP: "hw.optional.arm.FEAT_DPB",
    Aarch64Feature.SHA3: "hw.optional.arm.FEAT_SHA3",
    Aarch64Feature.ASIMDDP: "hw.optional.arm.FEAT_DotProd",
    Aarch64Feature.SHA512: "hw.optional.arm.FEAT_SHA512",
    Aarch64Feature.ASIMDFHM: "hw.optional.arm.FEAT_FHM",
    Aarch64Feature.DIT: "hw.optional.arm.FEAT_DIT",
    Aarch64Feature.USCAT: "hw.optional.arm.FEAT_LSE2",
    Aarch64Feature.FLAGM: "hw.optional.arm.FEAT_FlagM",
    Aarch64Feature.SSBS: "hw.optional.arm.FEAT_SSBS",
    Aarch64Feature.SB: "hw.optional.arm.FEAT_SB",
    Aarch64Feature.FLAGM2: "hw.optional.arm.FEAT_FlagM2",
    Aarch64Feature.FRINT: "hw.optional.arm.FEAT_FRINTTS",
    Aarch64Feature.I8MM: "hw.optional.arm.FEAT_I8MM",
    Aarch64Feature.BF16: "hw.optional.arm.FEAT_BF16",
    Aarch64Feature.BTI: "hw.optional.arm.FEAT_BTI",
}

WINDOWS_FEATURES = {
    Aarch64Feature.FP: (WindowsProcessorFeature.ARM_VFP_32_REGISTERS_AVAILABLE,),
    Aarch64Feature.ASIMD: (WindowsProcessorFeature.ARM_NEON_INSTRUCTIONS_AVAILABLE,),
    Aarch64Feature.CRC32: (WindowsProcessorFeature.ARM_V8_CRC32_INSTRUCTIONS_AVAILABLE,),
    Aarch64Feature.ASIMDDP: (WindowsProcessorFeature.ARM_V82_DP_INSTRUCTIONS_AVAILABLE,),
    Aarch64Feature.JSCVT: (WindowsProcessorFeature.ARM_V83_JSCVT_INSTRUCTIONS_AVAILABLE,),
    Aarch64Feature.LRCPC: (WindowsProcessorFeature.ARM_V83_LRCPC_INSTRUCTIONS_AVAILABLE,),
    Aarch64Feature.ATOMICS: (
        WindowsProcessorFeature.ARM_V81_ATOMIC_INSTRUCTIONS_AVAILABLE,
    ),
    # A single crypto flag covers all four of these.
    Aarch64Feature.AES: (WindowsProcessorFeature.ARM_V8_CRYPTO_INSTRUCTIONS_AVAILABLE,),
    Aarch64Feature.SHA1: (WindowsProcessorFeature.ARM_V8_CRYPTO_INSTRUCTIONS_AVAILABLE,),
    Aarch64Feature.SHA2: (WindowsProcessorFeature.ARM_V8_CRYPTO_INSTRUCTIONS_AVAILABLE,),
    Aarch64Feature.PMULL: (
        WindowsProcessorFeature.ARM_V8_CRYPTO_INSTRUCTIONS_AVAILABLE,
    ),
}


def aarch64_info_from_sysctl(lookup: Callable[[str], int | None]) -> Aarch64Info:
    """Build processor information from Darwin sysctl values.

    ``lookup`` maps a sysctl name to its integer value; ``None`` or 0 stands
    for a missing or failed entry.
    """

    def value(name: str) -> int:
        return lookup(name) or 0

    identification = {
        field: value(name) for field, name in SYSCTL_IDENTIFICATION.items()
    }
    features = frozenset(
        feature for feature, name in SYSCTL_FEATURES.items() if value(name) != 0
    )
    return Aarch64Info(features=features, **identification)


def aarch64_info_from_windows(
    is_feature_present: Callable[[int], bool], processor_revision: int
) -> Aarch64Info:
    """Build processor information from Windows processor feature queries."""
    present = {code: bool(is_feature_present(code)) for code in WindowsProcessorFeature}
    features = frozenset(
        feature
        for feature, codes in WINDOWS_FEATURES.items()
        if all(present[code] for code in codes)
    )
    return Aarch64Info(revision=processor_revision, features=features)