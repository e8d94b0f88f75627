import os
from dataclasses import dataclass, field, fields
from typing import Mapping, Optional, Tuple

import yaml

from .errors import ConfigError


CONFIG_ENV_VAR = "SINTERACTIVE_CONFIG"
SITE_CONFIG_PATH = "/etc/sinteractive.yaml"


@dataclass(frozen=True)
class LauncherConfig:
    salloc: str = "salloc"
    srun: str = "srun"
    scontrol: str = "scontrol"
    sinfo: str = "sinfo"
    job_name: str = "interactive"
    default_shell: str = "/bin/bash"
    shell_flags: Tuple[str, ...] = field(default=("-l",))

    @staticmethod
    def from_yaml(path: str) -> "LauncherConfig":
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config file '{path}': {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file '{path}': {e}") from e

        # An empty file is a valid config.
        if data is None:
            return LauncherConfig()
        if not isinstance(data, dict):
            raise ConfigError("Config must be a YAML mapping (dict).")

        known = {f.name for f in fields(LauncherConfig)}
        unknown = sorted(str(k) for k in data if k not in known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {unknown}")

        values = {}
        for key in known - {"shell_flags"}:
            if key not in data:
                continue
            value = data[key]
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(f"{key} must be a non-empty string")
            values[key] = value.strip()

        if "shell_flags" in data:
            flags = data["shell_flags"]
            if not isinstance(flags, list) or not all(isinstance(f, str) for f in flags):
                raise ConfigError("shell_flags must be a list of strings")
            values["shell_flags"] = tuple(flags)

        return LauncherConfig(**values)


def load_config(environ: Optional[Mapping[str, str]] = None) -> LauncherConfig:
    """Load the site config, falling back to built-in defaults when none exists."""
    environ = os.environ if environ is None else environ

    path = environ.get(CONFIG_ENV_VAR)
    if path:
        if not os.path.isfile(path):
            raise ConfigError(f"{CONFIG_ENV_VAR} points to a missing file: {path}")
        return LauncherConfig.from_yaml(path)

    if os.path.isfile(SITE_CONFIG_PATH):
        return LauncherConfig.from_yaml(SITE_CONFIG_PATH)
    return LauncherConfig()
