import pytest

from cpufeat.aarch64 import (
    SYSCTL_FEATURES,
    Aarch64Feature,
    Aarch64Info,
    WindowsProcessorFeature,
    aarch64_info_from_sysctl,
    aarch64_info_from_windows,
)
from cpufeat.introspection import feature_name, features_from_flags


def _sysctl(values):
    return lambda name: values.get(name, 0)


def _present(codes):
    return lambda code: code in codes


def test_feature_names_are_unique_and_known():
    names = [feature_name(f) for f in Aarch64Feature]
    assert len(names) == len(set(names))
    assert "unknown_feature" not in names
    assert "" not in names


def test_selected_feature_flags():
    assert features_from_flags(Aarch64Feature, "smei16i64 sveebf16") == {
        Aarch64Feature.SME_I16I64,
        Aarch64Feature.SVE_EBF16,
    }
    assert feature_name(Aarch64Feature.SVE_EBF16) == "sveebf16"


def test_default_info_is_empty():
    info = Aarch64Info()
    assert (info.implementer, info.variant, info.part, info.revision) == (0, 0, 0, 0)
    assert info.features == frozenset()


def test_sysctl_identification():
    info = aarch64_info_from_sysctl(
        _sysctl(
            {
                "hw.cputype": 16777228,
                "hw.cpusubtype": 2,
                "hw.cpufamily": 458787763,
                "hw.cpusubfamily": 2,
            }
        )
    )
    assert info.implementer == 16777228
    assert info.variant == 2
    assert info.part == 458787763
    assert info.revision == 2
    assert info.features == frozenset()


def test_sysctl_features():
    info = aarch64_info_from_sysctl(
        _sysctl(
            {
                "hw.optional.floatingpoint": 1,
                "hw.optional.AdvSIMD": 1,
                "hw.optional.arm.FEAT_SHA256": 1,
                "hw.optional.armv8_crc32": 1,
                "hw.optional.arm.FEAT_LSE2": 1,
                "hw.optional.arm.FEAT_BTI": 0,
            }
        )
    )
    assert info.features == {
        Aarch64Feature.FP,
        Aarch64Feature.ASIMD,
        Aarch64Feature.SHA2,
        Aarch64Feature.CRC32,
        Aarch64Feature.USCAT,
    }


def test_sysctl_none_means_missing():
    info = aarch64_info_from_sysctl(lambda name: None)
    assert info == Aarch64Info()


def test_sysctl_all_set_matches_mapped_features():
    info = aarch64_info_from_sysctl(lambda name: 1)
    assert info.features == frozenset(SYSCTL_FEATURES)
    assert Aarch64Feature.SVE not in info.features
    assert Aarch64Feature.CPUID not in info.features


def test_windows_revision_and_no_features():
    info = aarch64_info_from_windows(_present(set()), 7)
    assert info.revision == 7
    assert info.implementer == 0
    assert info.features == frozenset()


def test_windows_crypto_enables_four_features():
    info = aarch64_info_from_windows(
        _present({WindowsProcessorFeature.ARM_V8_CRYPTO_INSTRUCTIONS_AVAILABLE}), 0
    )
    assert info.features == {
        Aarch64Feature.AES,
        Aarch64Feature.SHA1,
        Aarch64Feature.SHA2,
        Aarch64Feature.PMULL,
    }


@pytest.mark.parametrize(
    "code, feature",
    [
        (WindowsProcessorFeature.ARM_VFP_32_REGISTERS_AVAILABLE, Aarch64Feature.FP),
        (WindowsProcessorFeature.ARM_NEON_INSTRUCTIONS_AVAILABLE, Aarch64Feature.ASIMD),
        (WindowsProcessorFeature.ARM_V8_CRC32_INSTRUCTIONS_AVAILABLE, Aarch64Feature.CRC32),
        (WindowsProcessorFeature.ARM_V82_DP_INSTRUCTIONS_AVAILABLE, Aarch64Feature.ASIMDDP),
        (WindowsProcessorFeature.ARM_V83_JSCVT_INSTRUCTIONS_AVAILABLE, Aarch64Feature.JSCVT),
        (WindowsProcessorFeature.ARM_V83_LRCPC_INSTRUCTIONS_AVAILABLE, Aarch64Feature.LRCPC),
        (
            WindowsProcessorFeature.ARM_V81_ATOMIC_INSTRUCTIONS_AVAILABLE,
            Aarch64Feature.ATOMICS,
        ),
    ],
)
def test_windows_single_feature(code, feature):
    info = aarch64_info_from_windows(_present({code}), 0)
    assert info.features == {feature}


def test_windows_all_present():
    info = aarch64_info_from_windows(lambda code: True, 1)
    assert len(info.features) == 11
    assert Aarch64Feature.SVE not in info.features
    assert info.revision == 1