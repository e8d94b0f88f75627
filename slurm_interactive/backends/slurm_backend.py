import re
from dataclasses import dataclass
from typing import Tuple

from ..config import LauncherConfig
from ..utils import run_cmd, which


INTERACTIVE_STEP_KEY = "LaunchParameters"
INTERACTIVE_STEP_VALUE = "use_interactive_step"


@dataclass(frozen=True)
class SchedulerProfile:
    supports_interactive_step: bool
    version: Tuple[int, int]
    version_known: bool = True


class SlurmBackend:
    def __init__(self, config: LauncherConfig):
        self.config = config

    def probe(self) -> SchedulerProfile:
        """Query scontrol and sinfo once each.

        Any failure degrades to a legacy, version 0.0 profile instead of raising.
        """
        supported = self._supports_interactive_step()
        version, known = self._scheduler_version()
        return SchedulerProfile(
            supports_interactive_step=supported,
            version=version,
            version_known=known,
        )

    def _supports_interactive_step(self) -> bool:
        out = self._query([self.config.scontrol, "show", "config"])
        return has_interactive_step(out)

    def _scheduler_version(self) -> Tuple[Tuple[int, int], bool]:
        out = self._query([self.config.sinfo, "--version"])
        return parse_version(out)

    @staticmethod
    def _query(args) -> str:
        if which(args[0]) is None:
            return ""
        try:
            rc, out, _ = run_cmd(args)
        except (OSError, UnicodeDecodeError):
            return ""
        if rc != 0:
            return ""
        return out


def has_interactive_step(config_text: str) -> bool:
    for line in config_text.splitlines():
        line = line.strip()
        if line.startswith(INTERACTIVE_STEP_KEY) and INTERACTIVE_STEP_VALUE in line:
            return True
    return False


def parse_version(version_text: str) -> Tuple[Tuple[int, int], bool]:
    """Parse 'slurm 21.08.5' into ((21, 8), True); unparseable text gives ((0, 0), False)."""
    words = version_text.split()
    if not words:
        return (0, 0), False

    parts = words[-1].split(".")
    numbers = []
    for part in (parts + ["", ""])[:2]:
        m = re.match(r"\d+", part)
        numbers.append(int(m.group(0)) if m else 0)

    known = re.match(r"\d+", parts[0]) is not None
    return (numbers[0], numbers[1]), known
