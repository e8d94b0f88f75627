import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def fake_shell(tmp_path):
    shell = tmp_path / "zsh"
    shell.write_text("#!/bin/sh\n")
    shell.chmod(0o755)
    return str(shell)


@pytest.fixture(autouse=True)
def quiet_syslog(monkeypatch):
    import syslog

    records = []
    monkeypatch.setattr(syslog, "openlog", lambda *a, **k: None)
    monkeypatch.setattr(syslog, "closelog", lambda: None)
    monkeypatch.setattr(syslog, "syslog", lambda *a: records.append(a))
    return records


@pytest.fixture
def fake_commands(monkeypatch):
    """Stub scontrol/sinfo. Map the command name to (rc, stdout) or an exception."""
    from slurm_interactive.backends import slurm_backend

    calls = []

    def install(outputs):
        def fake_run_cmd(args, timeout_s=None):
            calls.append(list(args))
            result = outputs[args[0]]
            if isinstance(result, Exception):
                raise result
            rc, out = result
            return rc, out, ""

        monkeypatch.setattr(slurm_backend, "which", lambda cmd: f"/usr/bin/{cmd}")
        monkeypatch.setattr(slurm_backend, "run_cmd", fake_run_cmd)
        return calls

    return install
