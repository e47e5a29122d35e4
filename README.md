# cpufeat

Find out which instruction-set features a processor offers. `cpufeat`
reads `/proc/cpuinfo` text (from a file or from a string you pass in)
and turns it into frozen dataclasses holding sets of enum members, one
module per architecture. It needs nothing beyond the standard library.

| Module              | Architecture | What it gives you |
|---------------------|--------------|-------------------|
| `cpufeat.arm`       | 32-bit ARM   | `parse_arm_cpuinfo`, `get_arm_info`, `get_arm_cpu_id`, `ArmFeature`, `ArmInfo` |
| `cpufeat.aarch64`   | AArch64      | `aarch64_info_from_sysctl`, `aarch64_info_from_windows`, `Aarch64Feature`, `Aarch64Info` |
| `cpufeat.mips`      | MIPS         | `parse_mips_cpuinfo`, `get_mips_info`, `MipsFeature`, `MipsInfo` |
| `cpufeat.loongarch` | LoongArch    | `parse_loongarch_cpuinfo`, `get_loongarch_info`, `LoongArchFeature`, `LoongArchInfo` |
| `cpufeat.ppc`       | PowerPC      | `parse_ppc_cpuinfo`, `get_ppc_platform_strings`, `PPCFeature`, `PPCPlatformStrings` |
| `cpufeat.s390x`     | IBM Z        | `S390XFeature`, `S390XInfo`, `S390XPlatformStrings` |

## Installation

```
pip install cpufeat
```

## Usage

### ARM

```python
from cpufeat.arm import ArmFeature, get_arm_cpu_id, parse_arm_cpuinfo

text = """\
Features        : half thumb fastmult vfp edsp neon vfpv3 tls vfpv4 idiva idivt
CPU implementer : 0x41
CPU architecture: 7
CPU variant     : 0x2
CPU part        : 0xc0f
CPU revision    : 3
"""
info = parse_arm_cpuinfo(text)
print(info.architecture)                # 7
print(ArmFeature.NEON in info.features) # True
print(hex(get_arm_cpu_id(info)))        # 0x4120c0f3
```

`parse_arm_cpuinfo` also corrects a few known kernel reporting bugs: an
architecture of 7 or more is lowered to 6 when the processor name says
`(v6l)`, IDIV is added for the Android emulator and for Qualcomm Krait
parts, NEON is removed for one faulty part, and `vfpv4`/`neon` imply
`vfpv3`, which implies `vfp`. Numeric fields that could not be parsed
hold -1.

### MIPS and LoongArch

```python
from cpufeat.loongarch import get_loongarch_info
from cpufeat.mips import MipsFeature, parse_mips_cpuinfo

info = get_loongarch_info()            # reads /proc/cpuinfo
mips = parse_mips_cpuinfo("ASEs implemented : mips16 smartmips dsp")
print(MipsFeature.SMART in mips.features)  # True
```

MIPS features come from the `ASEs implemented` line, LoongArch features
from the `Features` line.

### PowerPC

```python
from cpufeat.ppc import get_ppc_platform_strings

strings = get_ppc_platform_strings("/proc/cpuinfo", platform="power9")
print(strings.model, strings.machine, strings.cpu, strings.type.platform)
```

The `platform`, `model`, `machine` and `cpu` lines are read from cpuinfo;
`platform` and `base_platform` arguments, when given, fill `strings.type`.
Every string is cut to at most 63 characters.

### AArch64

```python
from cpufeat.aarch64 import aarch64_info_from_sysctl, aarch64_info_from_windows

values = {"hw.optional.floatingpoint": 1, "hw.optional.AdvSIMD": 1}
info = aarch64_info_from_sysctl(lambda name: values.get(name, 0))

present = {18, 19}
info = aarch64_info_from_windows(lambda code: code in present, processor_revision=3)
```

You supply the lookup: a function from a sysctl name to its value, or a
function answering whether a Windows processor feature code (see
`WindowsProcessorFeature`) is present. On Windows the single crypto flag
turns on `AES`, `SHA1`, `SHA2` and `PMULL` together.

### s390x

`S390XFeature` lists the IBM Z facilities; `S390XInfo` holds a set of
them and `S390XPlatformStrings` a processor count (-1 when unknown) and a
platform name cut to 63 characters.

### Shared helpers

Every feature enum derives from `cpufeat.introspection.CpuFeature`; each
member has a `feature_name` and the `cpuinfo_flag` the kernel prints.
`feature_name(x)` returns a member's name, or `"unknown_feature"` for
anything else; `features_from_flags(FeatureEnum, "flag flag ...")` maps
a flag list to members; `read_cpuinfo(path)` returns the file's text.

`cpufeat.text` holds the parsing helpers: `get_attribute_key_value`,
`iter_attributes`, `has_word`, `parse_positive_number`,
`trim_whitespace`, `copy_string`, `index_of`, `index_of_char`,
`starts_with`, `pop_front`, `pop_back` and `keep_front`.

A missing or unreadable cpuinfo file is not an error: the result is an
info object with no features and default fields.

## What it does not do

- It does not read the kernel's auxiliary vector (hardware capability
  bits); features come only from cpuinfo text or the lookups you pass.
- It has no cpuinfo parser for s390x, and none for AArch64 on Linux.
- For PowerPC it lists feature names in `PPCFeature` but detects none;
  it reads only the platform strings.
- It does not cover x86, and it has no command-line tool.