from enum import Enum
from typing import Tuple

from .backends.slurm_backend import SchedulerProfile


class Strategy(Enum):
    INTEGRATED_STEP = "integrated-step"
    LEGACY_SHELL_WRAP = "legacy-shell-wrap"


# Minor releases of Slurm 20 that already behave like 21+ for nested srun.
HANG_PRONE_20_MINORS = (11, 12)


def route_strategy(profile: SchedulerProfile) -> Tuple[Strategy, bool]:
    """Pick the invocation strategy and whether to warn about hanging srun calls.

    With use_interactive_step, salloc starts the shell itself and nested srun
    calls are safe. Otherwise the shell runs inside an srun --pty step, which on
    20.11+ holds all allocated resources so later srun calls block.
    """
    if profile.supports_interactive_step:
        return Strategy.INTEGRATED_STEP, False

    major, minor = profile.version
    warn = major >= 21 or (major == 20 and minor in HANG_PRONE_20_MINORS)
    return Strategy.LEGACY_SHELL_WRAP, warn
