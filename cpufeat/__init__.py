"""CPU feature detection for ARM, AArch64, MIPS, PowerPC, LoongArch and s390x."""

__version__ = "0.1.0"
__all__ = ["__version__"]