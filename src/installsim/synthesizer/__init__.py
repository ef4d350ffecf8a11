from installsim.synthesizer.generator import FakeBinarySynthesizer, is_executable, render_stub
from installsim.synthesizer.profiles import (
    APPLICATION_PROFILES,
    COMMON_PROFILES,
    DESKTOP_ENTRIES,
    BinaryProfile,
)

__all__ = [
    "APPLICATION_PROFILES",
    "COMMON_PROFILES",
    "DESKTOP_ENTRIES",
    "BinaryProfile",
    "FakeBinarySynthesizer",
    "is_executable",
    "render_stub",
]
