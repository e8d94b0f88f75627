import getpass
import os
import syslog
from typing import Mapping, Sequence

from .utils import format_command


SYSLOG_IDENT = "sinteractive"


def invoking_user(environ: Mapping[str, str]) -> str:
    name = environ.get("LOGNAME") or environ.get("USER")
    if name:
        return name
    try:
        return getpass.getuser()
    except (OSError, KeyError):
        # uid without a passwd entry
        return str(os.getuid())


def log_invocation(argv: Sequence[str], environ: Mapping[str, str]) -> None:
    """Record who ran the launcher and with which arguments."""
    syslog.openlog(ident=SYSLOG_IDENT, facility=syslog.LOG_USER)
    try:
        syslog.syslog(syslog.LOG_INFO, f"{invoking_user(environ)}: {format_command(argv)}")
    finally:
        syslog.closelog()
