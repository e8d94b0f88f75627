import argparse
from dataclasses import dataclass
from typing import Mapping, Sequence, Tuple


HELP_FLAGS = ("-h", "--help")
VERBOSE_FLAG = "--wrapper-verbose"
DRY_RUN_FLAG = "--wrapper-dry-run"
NO_X11_FLAG = "--no-x11"


@dataclass(frozen=True)
class InvocationRequest:
    passthrough: Tuple[str, ...] = ()
    x11_requested: bool = False
    verbose: bool = False
    dry_run: bool = False
    show_help: bool = False


def parse_request(argv: Sequence[str], environ: Mapping[str, str]) -> InvocationRequest:
    """Split wrapper flags from salloc options, which are kept verbatim and in order."""
    passthrough = []
    verbose = dry_run = show_help = no_x11 = False

    for token in argv:
        if token in HELP_FLAGS:
            show_help = True
        elif token == VERBOSE_FLAG:
            verbose = True
        elif token == DRY_RUN_FLAG:
            dry_run = True
        elif token == NO_X11_FLAG:
            no_x11 = True
        else:
            passthrough.append(token)

    return InvocationRequest(
        passthrough=tuple(passthrough),
        x11_requested=bool(environ.get("DISPLAY")) and not no_x11,
        verbose=verbose,
        dry_run=dry_run,
        show_help=show_help,
    )


def build_help_parser(prog: str = "sinteractive") -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog=prog,
        usage=f"{prog} [-h] [{VERBOSE_FLAG}] [{DRY_RUN_FLAG}] [{NO_X11_FLAG}] [salloc options...]",
        description="Start an interactive shell on Slurm compute resources.",
        epilog=(
            "All other options are passed to salloc unchanged, after the defaults "
            "'-J interactive --bell', so they override them. X11 forwarding is "
            "requested automatically when DISPLAY is set. The shell started is "
            "$SINTERACTIVE_SHELL, else your login shell."
        ),
    )
    ap.add_argument(VERBOSE_FLAG, action="store_true", help="Print the salloc command line before running it")
    ap.add_argument(DRY_RUN_FLAG, action="store_true", help="Print the salloc command line and exit")
    ap.add_argument(NO_X11_FLAG, action="store_true", help="Do not request X11 forwarding")
    return ap
