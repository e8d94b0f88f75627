from slurm_interactive.config import LauncherConfig
from slurm_interactive.options import build_options
from slurm_interactive.request import InvocationRequest, parse_request


def test_defaults_then_x11_then_user_tokens():
    request = parse_request(["-N", "2", "--x11"], {"DISPLAY": ":0"})
    options = build_options(request, LauncherConfig())

    assert options.allocation == ("-J", "interactive", "--bell", "--x11", "-N", "2", "--x11")
    assert options.execution == ("--pty", "--cpu-bind=none")


def test_no_x11_suppresses_auto_flag():
    request = parse_request(["--no-x11"], {"DISPLAY": ":0"})
    options = build_options(request, LauncherConfig())

    assert "--x11" not in options.allocation
    assert "--no-x11" not in options.allocation


def test_no_display_no_x11():
    options = build_options(InvocationRequest(passthrough=("-t", "10")), LauncherConfig())
    assert options.allocation == ("-J", "interactive", "--bell", "-t", "10")


def test_user_job_name_follows_default():
    request = parse_request(["-J", "debug"], {})
    options = build_options(request, LauncherConfig(job_name="sint"))

    assert options.allocation == ("-J", "sint", "--bell", "-J", "debug")


def test_user_tokens_never_reach_execution_list():
    request = parse_request(["--pty", "-c", "4"], {})
    options = build_options(request, LauncherConfig())

    assert options.execution == ("--pty", "--cpu-bind=none")


def test_parse_request_flags():
    request = parse_request(["--wrapper-verbose", "-p", "debug", "--wrapper-dry-run", "-h"], {})

    assert request.verbose
    assert request.dry_run
    assert request.show_help
    assert request.passthrough == ("-p", "debug")
    assert not request.x11_requested
