import pytest

from slurm_interactive.backends.slurm_backend import SchedulerProfile
from slurm_interactive.router import Strategy, route_strategy


@pytest.mark.parametrize("version", [(0, 0), (20, 11), (21, 8), (23, 2)])
def test_interactive_step_never_warns(version):
    profile = SchedulerProfile(supports_interactive_step=True, version=version)
    assert route_strategy(profile) == (Strategy.INTEGRATED_STEP, False)


@pytest.mark.parametrize("version", [(21, 0), (21, 5), (22, 0), (20, 11), (20, 12)])
def test_legacy_warns_on_hang_prone_versions(version):
    profile = SchedulerProfile(supports_interactive_step=False, version=version)
    assert route_strategy(profile) == (Strategy.LEGACY_SHELL_WRAP, True)


@pytest.mark.parametrize("version", [(20, 10), (20, 13), (20, 2), (19, 5), (0, 0)])
def test_legacy_without_warning(version):
    profile = SchedulerProfile(supports_interactive_step=False, version=version)
    assert route_strategy(profile) == (Strategy.LEGACY_SHELL_WRAP, False)
