import os
import sys
from dataclasses import dataclass
from typing import Callable, Mapping, NoReturn, Optional, Sequence, TextIO, Tuple

from .backends.slurm_backend import SchedulerProfile
from .config import LauncherConfig
from .options import build_options
from .request import InvocationRequest
from .router import Strategy, route_strategy
from .shell import account_shell, resolve_login_shell
from .utils import format_command


HANG_ADVISORY = (
    "WARNING: This Slurm version runs the interactive shell as a job step that "
    "holds all allocated resources.\n"
    "WARNING: srun commands started from this shell will hang unless you pass "
    "--overlap (or export SLURM_OVERLAP=1)."
)


@dataclass(frozen=True)
class CommandPlan:
    strategy: Strategy
    allocation_argv: Tuple[str, ...]
    execution_argv: Tuple[str, ...] = ()
    shell: Optional[str] = None
    shell_flags: Tuple[str, ...] = ()
    warn_of_hang: bool = False

    @property
    def argv(self) -> Tuple[str, ...]:
        if self.strategy is Strategy.INTEGRATED_STEP:
            return self.allocation_argv
        return self.allocation_argv + self.execution_argv + (self.shell,) + self.shell_flags


def plan_command(
    request: InvocationRequest,
    profile: SchedulerProfile,
    config: LauncherConfig,
    environ: Mapping[str, str],
    account_lookup: Optional[Callable[[Optional[str]], Optional[str]]] = None,
) -> CommandPlan:
    strategy, warn = route_strategy(profile)
    options = build_options(request, config)
    allocation_argv = (config.salloc,) + options.allocation

    if strategy is Strategy.INTEGRATED_STEP:
        return CommandPlan(strategy=strategy, allocation_argv=allocation_argv)

    shell = resolve_login_shell(environ, config.default_shell, account_lookup or account_shell)
    return CommandPlan(
        strategy=strategy,
        allocation_argv=allocation_argv,
        execution_argv=(config.srun,) + options.execution,
        shell=shell,
        shell_flags=config.shell_flags,
        warn_of_hang=warn,
    )


def exec_launcher(argv: Sequence[str]) -> NoReturn:
    os.execvp(argv[0], list(argv))


def dispatch(
    plan: CommandPlan,
    verbose: bool = False,
    launcher: Callable[[Sequence[str]], None] = exec_launcher,
    stream: Optional[TextIO] = None,
) -> None:
    """Replace the current process with the planned command.

    Only returns when a non-exec launcher is injected.
    """
    stream = sys.stderr if stream is None else stream

    if plan.strategy is Strategy.LEGACY_SHELL_WRAP and plan.warn_of_hang:
        print(HANG_ADVISORY, file=stream)
    if verbose:
        print(f"Running: {format_command(plan.argv)}", file=stream)
    stream.flush()

    launcher(plan.argv)
