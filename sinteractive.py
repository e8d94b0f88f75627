#!/usr/bin/env python
import os
import sys

from slurm_interactive.audit import log_invocation
from slurm_interactive.backends.slurm_backend import SlurmBackend
from slurm_interactive.config import load_config
from slurm_interactive.dispatcher import dispatch, exec_launcher, plan_command
from slurm_interactive.errors import ConfigError, ShellResolutionError
from slurm_interactive.request import build_help_parser, parse_request
from slurm_interactive.utils import format_command


def print_launcher(argv) -> None:
    print(format_command(argv))


def main(argv=None, environ=None, launcher=exec_launcher) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    environ = os.environ if environ is None else environ

    log_invocation(argv, environ)
    request = parse_request(argv, environ)
    if request.show_help:
        build_help_parser().print_help()
        return 0

    try:
        config = load_config(environ)
        profile = SlurmBackend(config).probe()
        plan = plan_command(request, profile, config, environ)
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    except ShellResolutionError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if request.verbose and not profile.version_known:
        print("Scheduler version unknown; assuming 0.0.", file=sys.stderr)

    if request.dry_run:
        launcher = print_launcher

    try:
        dispatch(plan, verbose=request.verbose, launcher=launcher)
    except OSError as e:
        print(f"ERROR: cannot run {plan.argv[0]}: {e}", file=sys.stderr)
        return 127
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
