"""s390x feature and platform descriptions."""

from __future__ import annotations

from dataclasses import dataclass

from cpufeat.introspection import CpuFeature
from cpufeat.text import copy_string

PLATFORM_SIZE = 64


class S390XFeature(CpuFeature):
    """s390x facilities, with their cpuinfo flags."""

    ESAN3 = ("esan3", "esan3")  # N3 instructions backported to esa-mode
    ZARCH = ("zarch", "zarch")  # z/Architecture mode active
    STFLE = ("stfle", "stfle")  # store-facility-list-extended
    MSA = ("msa", "msa")  # message-security assist
    LDISP = ("ldisp", "ldisp")  # long-displacement
    EIMM = ("eimm", "eimm")  # extended-immediate
    DFP = ("dfp", "dfp")  # decimal floating point
    EDAT = ("edat", "edat")  # huge page support
    ETF3EH = ("etf3eh", "etf3eh")  # extended-translation facility 3 enhancement
    HIGHGPRS = ("highgprs", "highgprs")  # 64-bit registers for 31-bit processes
    TE = ("te", "te")  # transactional execution
    VX = ("vx", "vx")  # vector extension facility
    VXD = ("vxd", "vxd")  # vector-packed-decimal facility
    VXE = ("vxe", "vxe")  # vector-enhancement facility 1
    GS = ("gs", "gs")  # guarded-storage facility
    VXE2 = ("vxe2", "vxe2")  # vector-enhancements facility 2
    VXP = ("vxp", "vxp")  # vector-packed-decimal-enhancement facility
    SORT = ("sort", "sort")  # enhanced-sort facility
    DFLT = ("dflt", "dflt")  # deflate-conversion facility
    VXP2 = ("vxp2", "vxp2")  # vector-packed-decimal-enhancement facility 2
    NNPA = ("nnpa", "nnpa")  # neural network processing assist facility
    PCIMIO = ("pcimio", "pcimio")  # PCI mio facility
    SIE = ("sie", "sie")  # virtualization support


@dataclass(frozen=True)
class S390XInfo:
    """Detected s390x facilities."""

    features: frozenset[S390XFeature] = frozenset()


@dataclass(frozen=True)
class S390XPlatformStrings:
    """Processor count (-1 when unknown) and platform type of an s390x machine.

    The platform name is kept to at most 63 characters.
    """

    num_processors: int = -1
    platform: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "platform", copy_string(self.platform, PLATFORM_SIZE))