"""Typed, layered configuration loader with precedence handling."""
from __future__ import annotations

import os
import configparser
from dataclasses import dataclass, fields
from pathlib import Path
from threading import RLock
from typing import Any, Callable, Dict, Optional, Tuple, get_type_hints

# --------------------------------------------------------------------------- #
#  Paths & default definitions
# --------------------------------------------------------------------------- #

ROOT_MARKER = "pyproject.toml"
ENV_PREFIX = "CONTENTFLOW_"


def _find_project_root(start: Optional[Path] = None) -> Path:
    here = (start or Path(__file__)).resolve()
    for parent in (here, *here.parents):
        if (parent / ROOT_MARKER).is_file():
            return parent
    return Path(__file__).resolve().parents[2]


PROJECT_ROOT = _find_project_root()
CONFIG_DIR = Path(__file__).resolve().parent
DEFAULTS_INI = CONFIG_DIR / "defaults.ini"
PROJECT_INI_NAME = "contentflow.ini"


_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "Workspace": {
        "hooks_dir": ".workspace/hooks",
        "git_hooks_dir": ".git/hooks",
        "root_marker": ROOT_MARKER,
    },
    "Tools": {
        "coverage_tool": "coverage",
    },
    "Logging": {
        "level": "INFO",
        "format": "%(levelname)s %(name)s: %(message)s",
    },
}


# --------------------------------------------------------------------------- #
#  Datamodels
# --------------------------------------------------------------------------- #

@dataclass
class WorkspaceConfig:
    hooks_dir: Path = Path(".workspace/hooks")
    git_hooks_dir: Path = Path(".git/hooks")
    root_marker: str = ROOT_MARKER


@dataclass
class ToolsConfig:
    coverage_tool: str = "coverage"


@dataclass
class LoggingConfig:
    level: str = "INFO"
    format: str = "%(levelname)s %(name)s: %(message)s"


# --------------------------------------------------------------------------- #
#  Helpers
# --------------------------------------------------------------------------- #

def _read_ini(path: Path) -> Dict[str, Dict[str, Any]]:
    # interpolation off: the logging format is full of '%(...)s'
    cp = configparser.ConfigParser(interpolation=None)
    cp.read(path, encoding="utf-8")
    data: Dict[str, Dict[str, Any]] = {}
    for section in cp.sections():
        data[section] = {k: v for k, v in cp.items(section)}
    return data


def _apply(target: Dict[str, Dict[str, Any]], source: Dict[str, Dict[str, Any]],
           layer: str, origin: str,
           sources: Dict[Tuple[str, str], Dict[str, str]]) -> None:
    for section, items in source.items():
        sec = target.setdefault(section, {})
        for key, value in items.items():
            sec[key] = value
            sources[(section, key)] = {"layer": layer, "source": origin}


def _cast(value: Any, typ: type) -> Any:
    if typ is Path:
        return Path(str(value)).expanduser()
    if typ is bool:
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in {"1", "true", "yes", "on"}
    if typ is int:
        return int(value)
    return typ(value)


def _build_dataclass(cls: type, data: Dict[str, Any]) -> Any:
    hints = get_type_hints(cls)
    kwargs = {}
    for field in fields(cls):
        val = data.get(field.name, field.default)
        kwargs[field.name] = _cast(val, hints[field.name])
    return cls(**kwargs)


def _env_overlays(environ: Optional[Dict[str, str]] = None) -> Dict[str, Dict[str, Any]]:
    result: Dict[str, Dict[str, Any]] = {}
    for env_key, value in (os.environ if environ is None else environ).items():
        if not env_key.startswith(ENV_PREFIX):
            continue
        remainder = env_key[len(ENV_PREFIX):]
        parts = remainder.split("__", 1)
        if len(parts) != 2:
            continue
        section, key = parts
        section = section.title()
        key = key.lower()
        result.setdefault(section, {})[key] = value
    return result


def _user_config_path() -> Path:
    if os.name == "nt":
        appdata = os.environ.get("APPDATA") or (Path.home() / "AppData" / "Roaming")
        return Path(appdata) / "ContentFlow" / "config.ini"
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "contentflow" / "config.ini"


# --------------------------------------------------------------------------- #
#  ConfigService
# --------------------------------------------------------------------------- #


class ConfigService:
    """Facade merging layered configuration with type safety.

    Layers (later wins): embedded defaults, ``defaults.ini``, environment
    (``CONTENTFLOW_<SECTION>__<KEY>``), ``<project root>/contentflow.ini``,
    the per-user config file.
    """

    def __init__(
        self,
        *,
        project_root: Optional[Path] = None,
        user_ini: Optional[Path] = None,
        environ: Optional[Dict[str, str]] = None,
    ) -> None:
        self._lock = RLock()
        self._project_root = Path(project_root) if project_root else PROJECT_ROOT
        self._user_ini = user_ini
        self._environ = environ
        self.reload()

    # ------------------------------------------------------------------ #
    def reload(self) -> None:
        with self._lock:
            merged: Dict[str, Dict[str, Any]] = {}
            sources: Dict[Tuple[str, str], Dict[str, str]] = {}

            # Layer 0: embedded defaults
            _apply(merged, _DEFAULTS, "code", "embedded", sources)

            # Layer 1: defaults.ini
            if DEFAULTS_INI.exists():
                _apply(merged, _read_ini(DEFAULTS_INI), "defaults.ini", str(DEFAULTS_INI), sources)

            # Layer 2: environment variables
            _apply(merged, _env_overlays(self._environ), "env", "os.environ", sources)

            # Layer 3: project config
            project_ini = self._project_root / PROJECT_INI_NAME
            if project_ini.exists():
                _apply(merged, _read_ini(project_ini), "project", str(project_ini), sources)

            # Layer 4: user overrides
            user_ini = self._user_ini or _user_config_path()
            if user_ini.exists():
                _apply(merged, _read_ini(user_ini), "user", str(user_ini), sources)

            self._merged = merged
            self._sources = sources

            self.workspace = _build_dataclass(WorkspaceConfig, merged.get("Workspace", {}))
            self.tools = _build_dataclass(ToolsConfig, merged.get("Tools", {}))
            self.logging = _build_dataclass(LoggingConfig, merged.get("Logging", {}))

    # ------------------------------------------------------------------ #
    def get(self, section: str, key: str, *, cast: Callable[[Any], Any] | type = str) -> Any:
        val = self._merged.get(section, {}).get(key)
        if val is None:
            return None
        if isinstance(cast, type):
            return _cast(val, cast)
        return cast(val)

    def meta_source(self, section: str, key: str) -> Dict[str, str] | None:
        return self._sources.get((section, key))


# Global singleton
config_service = ConfigService()
