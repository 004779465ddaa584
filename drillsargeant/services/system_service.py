from __future__ import annotations

import platform

# Heading reported to the front-end; not configurable
APP_TITLE = "DrillSargeant Desktop v1.0"

# platform.system() / platform.machine() spellings mapped to the names
# the desktop runtime reports
_OS_ALIASES = {
    "darwin": "macos",
}
_ARCH_ALIASES = {
    "amd64": "x86_64",
    "x64": "x86_64",
    "arm64": "aarch64",
    "i386": "x86",
    "i686": "x86",
}


def host_os() -> str:
    name = platform.system().lower() or "unknown"
    return _OS_ALIASES.get(name, name)


def host_arch() -> str:
    name = platform.machine().lower() or "unknown"
    return _ARCH_ALIASES.get(name, name)


class SystemService:
    @staticmethod
    def get_system_info() -> str:
        return (
            f"{APP_TITLE}\n"
            f"Platform: {host_os()}\n"
            f"Architecture: {host_arch()}"
        )
