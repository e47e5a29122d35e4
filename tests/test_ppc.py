from cpufeat.introspection import feature_name, features_from_flags
from cpufeat.ppc import (
    PPCFeature,
    PPCPlatformStrings,
    PPCPlatformTypeStrings,
    get_ppc_platform_strings,
    parse_ppc_cpuinfo,
)

CPUINFO = (
    "processor\t: 0\n"
    "cpu\t\t: POWER9 (architected), altivec supported\n"
    "clock\t\t: 3783.000000MHz\n"
    "revision\t: 2.2 (pvr 004e 1202)\n"
    "\n"
    "timebase\t: 512000000\n"
    "platform\t: pSeries\n"
    "model\t\t: IBM,0000-00X\n"
    "machine\t\t: CHRP IBM,0000-00X\n"
    "MMU\t\t: Hash\n"
)


def test_parse_cpuinfo_fields():
    strings = parse_ppc_cpuinfo(CPUINFO)
    assert strings.cpu == "POWER9 (architected), altivec supported"
    assert strings.platform == "pSeries"
    assert strings.model == "IBM,0000-00X"
    assert strings.machine == "CHRP IBM,0000-00X"
    assert strings.type == PPCPlatformTypeStrings()


def test_platform_key_matches_as_word():
    strings = parse_ppc_cpuinfo("base platform : power9\n")
    assert strings.platform == "power9"


def test_platform_key_partial_word_ignored():
    strings = parse_ppc_cpuinfo("platforms : power9\n")
    assert strings.platform == ""


def test_empty_content_gives_defaults():
    assert parse_ppc_cpuinfo("") == PPCPlatformStrings()


def test_strings_are_truncated():
    strings = PPCPlatformStrings(cpu="x" * 100)
    assert strings.cpu == "x" * 63
    kind = PPCPlatformTypeStrings(platform="y" * 100, base_platform="short")
    assert kind.platform == "y" * 63
    assert kind.base_platform == "short"


def test_get_platform_strings_from_file(tmp_path):
    path = tmp_path / "cpuinfo"
    path.write_text(CPUINFO)
    strings = get_ppc_platform_strings(str(path), "power9", "power8")
    assert strings.platform == "pSeries"
    assert strings.type.platform == "power9"
    assert strings.type.base_platform == "power8"


def test_get_platform_strings_missing_file(tmp_path):
    strings = get_ppc_platform_strings(str(tmp_path / "absent"), "power9")
    assert strings.cpu == ""
    assert strings.type == PPCPlatformTypeStrings(platform="power9")


def test_feature_names_and_flags():
    assert feature_name(PPCFeature.POWER5_PLUS) == "power5plus"
    assert PPCFeature.POWER5_PLUS.cpuinfo_flag == "power5+"
    assert feature_name(PPCFeature.MAC_4XX) == "mac_4xx"
    assert PPCFeature.MAC_4XX.cpuinfo_flag == "4xxmac"


def test_feature_names_distinct():
    names = [feature_name(feature) for feature in PPCFeature]
    assert len(set(names)) == len(names)
    assert "unknown_feature" not in names


def test_features_from_flags_roundtrip():
    flags = " ".join(feature.cpuinfo_flag for feature in PPCFeature)
    assert features_from_flags(PPCFeature, flags) == frozenset(PPCFeature)