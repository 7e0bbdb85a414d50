"""
Settings resolution for tcllsp.

Settings come from, in decreasing priority:

1. Client configuration supplied via ``initializationOptions`` or
   ``workspace/didChangeConfiguration`` (section ``tcl``).
2. A ``.tcllsp.toml`` project config file in the workspace root.
3. Command-line options the server was started with.
4. Built-in defaults.

Client keys may be camelCase (``maxNumberOfProblems``) or snake_case.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

logger = logging.getLogger(__name__)

PROJECT_CONFIG = '.tcllsp.toml'

_ALIASES = {
    'maxNumberOfProblems': 'max_number_of_problems',
    'requestTimeout': 'request_timeout',
    'logLevel': 'log_level',
    'syncMode': 'sync_mode',
}

# "pull": the server asks per file (tcl/... requests).
# "batch": one GetDictList / GetItemList per scan, answers pushed back.
SYNC_MODES = ('pull', 'batch')


@dataclass(frozen=True)
class Settings:
    max_number_of_problems: int = 1000
    request_timeout: float = 30.0
    debounce: float = 0.3
    log_level: str | None = None
    sync_mode: str = 'pull'


def _coerce(raw: Mapping[str, Any] | None) -> dict[str, Any]:
    """Keep the recognised keys of *raw*, converted to the field types."""
    if not raw:
        return {}
    types = {f.name: f.type for f in fields(Settings)}
    out: dict[str, Any] = {}
    for key, value in raw.items():
        name = _ALIASES.get(key, key)
        if name not in types or value is None:
            continue
        try:
            if name == 'max_number_of_problems':
                value = int(value)
            elif name in ('request_timeout', 'debounce'):
                value = float(value)
            else:
                value = str(value)
            if name == 'sync_mode' and value not in SYNC_MODES:
                raise ValueError(value)
        except (TypeError, ValueError):
            logger.warning('ignoring invalid setting %s=%r', key, value)
            continue
        out[name] = value
    return out


def _read_project_config(workspace_root: str | None) -> dict[str, Any]:
    """Parse ``.tcllsp.toml`` in *workspace_root*; empty when absent or broken."""
    if not workspace_root:
        return {}
    try:
        import tomllib  # Python 3.11+
    except ImportError:
        try:
            import tomli as tomllib  # fallback
        except ImportError:
            return {}

    config_path = Path(workspace_root) / PROJECT_CONFIG
    if not config_path.exists():
        return {}

    try:
        data = tomllib.loads(config_path.read_text(encoding='utf-8'))
    except Exception:
        logger.warning('could not read %s', config_path, exc_info=True)
        return {}
    # Accept either top-level keys or a [tcl] table.
    section = data.get('tcl', data)
    return _coerce(section if isinstance(section, dict) else {})


def settings_section(options: Any) -> Mapping[str, Any] | None:
    """Extract the ``tcl`` section from client options or settings.

    Some clients send the section itself, some wrap it in ``{"tcl": {...}}``,
    and some send a typed object.
    """
    if options is None:
        return None
    if not isinstance(options, Mapping):
        options = getattr(options, '__dict__', None) or {}
    section = options.get('tcl', options)
    return section if isinstance(section, Mapping) else None


class SettingsResolver:
    """Resolves the effective :class:`Settings` for the session."""

    def __init__(self, workspace_root: str | None = None,
                 launch: Mapping[str, Any] | None = None):
        self._workspace_root = workspace_root
        self._launch = _coerce(launch)
        self._client: dict[str, Any] = {}

    def set_client_settings(self, raw: Mapping[str, Any] | None) -> None:
        """Replace the client-supplied overrides (None clears them)."""
        self._client = _coerce(raw)

    def resolve(self) -> Settings:
        merged = dict(self._launch)
        merged.update(_read_project_config(self._workspace_root))
        merged.update(self._client)
        return replace(Settings(), **merged)
