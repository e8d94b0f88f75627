class InteractiveLaunchError(RuntimeError):
    """Base class for launcher errors."""


class ConfigError(InteractiveLaunchError):
    pass


class ShellResolutionError(InteractiveLaunchError):
    pass
