import os
import pwd
from typing import Callable, Mapping, Optional

from .errors import ShellResolutionError


SHELL_ENV_VAR = "SINTERACTIVE_SHELL"


def is_executable(path: Optional[str]) -> bool:
    return bool(path) and os.path.isfile(path) and os.access(path, os.X_OK)


def account_shell(name: Optional[str]) -> Optional[str]:
    """Login shell from the passwd database, by login name or else the current uid."""
    try:
        if name:
            return pwd.getpwnam(name).pw_shell or None
        return pwd.getpwuid(os.getuid()).pw_shell or None
    except KeyError:
        return None


def resolve_login_shell(
    environ: Mapping[str, str],
    default_shell: str,
    account_lookup: Callable[[Optional[str]], Optional[str]] = account_shell,
) -> str:
    override = environ.get(SHELL_ENV_VAR)
    if is_executable(override):
        return override

    login = environ.get("LOGNAME") or environ.get("USER")
    shell = account_lookup(login) or default_shell

    if not is_executable(shell):
        raise ShellResolutionError(f"Login shell '{shell}' is not executable.")
    return shell
