import shlex
import shutil
import subprocess
from typing import List, Optional, Sequence, Tuple


def which(cmd: str) -> Optional[str]:
    return shutil.which(cmd)


def run_cmd(args: List[str], timeout_s: Optional[int] = None) -> Tuple[int, str, str]:
    """Run a command and return (returncode, stdout, stderr)."""
    p = subprocess.run(
        args,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        timeout=timeout_s,
        check=False,
    )
    return p.returncode, p.stdout.strip(), p.stderr.strip()


def format_command(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)
