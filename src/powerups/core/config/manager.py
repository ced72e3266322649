"""
powerups configuration management (YAML only).
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

import yaml

from powerups.core.exceptions import ConfigError
from powerups.core.utils.io import read_yaml
from powerups.core.utils.merge import deep_merge as _deep_merge
from powerups.data import get_data_path

logger = logging.getLogger(__name__)

PROJECT_CONFIG_FILENAME = ".powerups.yaml"
ENV_PREFIX = "POWERUPS_"


class ConfigManager:
    """Load and merge powerups configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: POWERUPS_<section>__<key>
    2. Project config: <repo_root>/.powerups.yaml
    3. Bundled defaults: powerups.data/config/*.yaml (alphabetical order)
    """

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self.repo_root = Path(repo_root) if repo_root else Path.cwd()
        self.core_config_dir = get_data_path("config")
        self.project_config_path = self.repo_root / PROJECT_CONFIG_FILENAME

    def deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge dictionaries. Delegates to shared implementation."""
        return _deep_merge(base, override)

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        # Fail closed: configuration must never silently ignore invalid YAML.
        try:
            data = read_yaml(path, default={}, raise_on_error=True)
        except (yaml.YAMLError, UnicodeDecodeError) as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}", context={"path": str(path)}) from exc
        if not isinstance(data, dict):
            raise ConfigError(
                f"Configuration in {path} must be a mapping, got {type(data).__name__}",
                context={"path": str(path)},
            )
        return data

    # ========== Environment overrides ==========

    def _as_bool(self, v: str) -> Optional[bool]:
        low = v.strip().lower()
        if low in {"true", "false"}:
            return low == "true"
        return None

    def _as_int(self, v: str) -> Optional[int]:
        if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
            return int(v)
        return None

    def _as_float(self, v: str) -> Optional[float]:
        s = v.strip()
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        return None

    def _as_json(self, v: str) -> Optional[Any]:
        s = v.strip()
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except json.JSONDecodeError:
                return None
        return None

    def _coerce_type(self, value: str) -> Any:
        for caster in (self._as_bool, self._as_int, self._as_float, self._as_json):
            result = caster(value)
            if result is not None:
                return result
        # Keep whitespace-only values intact (e.g. a custom nesting indent).
        return value if not value.strip() else value.strip()

    def _iter_env_overrides(self) -> Iterator[Tuple[List[str], Any]]:
        for key in sorted(os.environ.keys()):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX):]
            segs = [s.lower() for s in raw.split("__")]
            if not raw or any(not s for s in segs):
                logger.warning("Ignoring malformed %s* key: %s", ENV_PREFIX, key)
                continue
            yield segs, self._coerce_type(os.environ[key])

    def _set_nested(self, root: Dict[str, Any], path: List[str], value: Any) -> None:
        cur = root
        for part in path[:-1]:
            nxt = cur.get(part)
            if not isinstance(nxt, dict):
                nxt = {}
                cur[part] = nxt
            cur = nxt
        cur[path[-1]] = value

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> None:
        for path, typed_value in self._iter_env_overrides():
            self._set_nested(cfg, path, typed_value)

    # ========== Loading ==========

    def load_config(self) -> Dict[str, Any]:
        """Load and merge configuration from all sources.

        Returns:
            Merged configuration dictionary
        """
        cfg: Dict[str, Any] = {}
        for path in sorted(self.core_config_dir.glob("*.yaml")):
            cfg = self.deep_merge(cfg, self.load_yaml(path))

        if self.project_config_path.exists():
            logger.debug("Loading project config %s", self.project_config_path)
            cfg = self.deep_merge(cfg, self.load_yaml(self.project_config_path))

        self.apply_env_overrides(cfg)
        return cfg


__all__ = ["ConfigManager", "PROJECT_CONFIG_FILENAME", "ENV_PREFIX"]
