from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from mk.application.config_models import MkConfig
from mk.domain.constants import DEFAULT_CONFIG_RELPATH


class ConfigLoadError(Exception):
    def __init__(self, message: str, *, path: Path | None = None, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.cause = cause

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message}: {self.path}"


def _load_yaml_mapping(path: Path) -> dict[str, Any]:
    """
    Load YAML file and ensure root is a mapping.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as e:
        raise ConfigLoadError("Failed to read config file", path=path, cause=e) from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigLoadError("Malformed YAML", path=path, cause=e) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigLoadError("YAML root must be a mapping", path=path)

    return data


def load_config(*, project_root: Path | None = None, user_home: Path | None = None) -> MkConfig:
    """
    Load and merge config with precedence (highest wins):
    environment (handled by the editor launcher) > project > user > defaults.

    Files:
      - user:    user_home/.mk/config.yml
      - project: project_root/.mk/config.yml

    Keys are merged flat; a key set in the project file replaces the
    user's value.
    """
    project_root = project_root or Path.cwd()
    user_home = user_home or Path.home()

    merged: dict[str, Any] = {}
    last_path: Path | None = None
    for path in (user_home / DEFAULT_CONFIG_RELPATH, project_root / DEFAULT_CONFIG_RELPATH):
        layer = _load_yaml_mapping(path)
        if layer:
            merged.update(layer)
            last_path = path

    try:
        return MkConfig.model_validate(merged)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigLoadError(f"Invalid config ({details})", path=last_path, cause=e) from e
