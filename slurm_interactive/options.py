from dataclasses import dataclass
from typing import Tuple

from .config import LauncherConfig
from .request import InvocationRequest


BELL_FLAG = "--bell"
X11_FLAG = "--x11"

# srun defaults for the shell step; there is no user override for these.
EXECUTION_DEFAULTS: Tuple[str, ...] = ("--pty", "--cpu-bind=none")


@dataclass(frozen=True)
class OptionLists:
    allocation: Tuple[str, ...]
    execution: Tuple[str, ...]


def build_options(request: InvocationRequest, config: LauncherConfig) -> OptionLists:
    # User tokens last; salloc keeps the last repeated option.
    allocation = ["-J", config.job_name, BELL_FLAG]
    if request.x11_requested:
        allocation.append(X11_FLAG)
    allocation.extend(request.passthrough)

    return OptionLists(allocation=tuple(allocation), execution=EXECUTION_DEFAULTS)
