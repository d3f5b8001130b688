"""Build information of the running application."""

from __future__ import annotations

import platform
import sys
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class BuildInfo:
    """All available build information."""

    version: str
    commit_hash: str
    build_date: str
    runtime_version: str
    os: str
    arch: str
    compiler: str

    def fields(self) -> dict[str, Any]:
        """Return the build information as log context fields."""
        return {
            "version": self.version,
            "commit_hash": self.commit_hash,
            "build_date": self.build_date,
            "runtime_version": self.runtime_version,
            "os": self.os,
            "arch": self.arch,
            "compiler": self.compiler,
        }


def new_build_info(version: str, commit_hash: str, build_date: str) -> BuildInfo:
    """Collect build information, completing it with details of the running interpreter."""
    return BuildInfo(
        version=version,
        commit_hash=commit_hash,
        build_date=build_date,
        runtime_version=platform.python_version(),
        os=sys.platform,
        arch=platform.machine(),
        compiler=platform.python_implementation(),
    )