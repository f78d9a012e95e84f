"""
Generator configuration.

Loads config.yml (or a user supplied YAML file) and exposes the recognised
options with defaults applied. Command line values are layered on top with
with_overrides().
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

import yaml

__all__ = ["GeneratorConfig", "GeneratorConfigLoader", "DEFAULT_CONFIG_PATH", "load_config"]

DEFAULT_OUTPUT_DIR = "out"

_BOOL_KEYS = ("generateFrontMatter", "usePygments", "generateIndex")
_PATH_KEYS = ("outputDir", "exampleDirBase")
_STR_KEYS = ("exampleLanguage",)
_KNOWN_KEYS = set(_BOOL_KEYS) | set(_PATH_KEYS) | set(_STR_KEYS)


def _build_config_path() -> str:
	config_dir = os.path.dirname(__file__)
	return os.path.join(config_dir, "config.yml")


DEFAULT_CONFIG_PATH = _build_config_path()


@dataclass(frozen=True)
class GeneratorConfig:
	output_dir: str = DEFAULT_OUTPUT_DIR
	example_dir_base: Optional[str] = None
	generate_front_matter: bool = False
	use_pygments: bool = False
	example_language: str = "java"
	generate_index: bool = False

	def with_overrides(self, **overrides: Any) -> "GeneratorConfig":
		"""Return a copy with every non-None override applied."""
		changes = {key: value for key, value in overrides.items() if value is not None}
		return replace(self, **changes)


class GeneratorConfigLoader:
	"""Load and validate generator configuration from YAML."""

	def __init__(self, config_path: str) -> None:
		self._config_path = config_path
		self._config = self._load()
		self._validate()

	def _load(self) -> Dict[str, Any]:
		if not os.path.isfile(self._config_path):
			raise FileNotFoundError(f"Generator config not found: {self._config_path}")
		with open(self._config_path, "r", encoding="utf-8") as f:
			data = yaml.safe_load(f)
		if data is None:
			return {}
		if not isinstance(data, dict):
			raise ValueError(f"Generator config must be a mapping: {self._config_path}")
		return data

	def _validate(self) -> None:
		unknown = sorted(str(key) for key in self._config if key not in _KNOWN_KEYS)
		if unknown:
			raise ValueError(f"Unknown config keys in {self._config_path}: {', '.join(unknown)}")

		for key in _BOOL_KEYS:
			value = self._config.get(key)
			if value is not None and not isinstance(value, bool):
				raise ValueError(f"{key} must be a boolean")

		for key in _PATH_KEYS + _STR_KEYS:
			value = self._config.get(key)
			if value is not None and (not isinstance(value, str) or not value.strip()):
				raise ValueError(f"{key} must be a non-empty string")

	def _resolve_path(self, key: str) -> Optional[str]:
		"""Resolve a path option against the config file's directory."""
		rel_path = self._config.get(key)
		if rel_path is None:
			return None
		config_dir = os.path.dirname(os.path.abspath(self._config_path))
		return os.path.normpath(os.path.join(config_dir, rel_path))

	@property
	def output_dir(self) -> str:
		return self._resolve_path("outputDir") or DEFAULT_OUTPUT_DIR

	@property
	def example_dir_base(self) -> Optional[str]:
		return self._resolve_path("exampleDirBase")

	@property
	def generate_front_matter(self) -> bool:
		return bool(self._config.get("generateFrontMatter", False))

	@property
	def use_pygments(self) -> bool:
		return bool(self._config.get("usePygments", False))

	@property
	def example_language(self) -> str:
		return self._config.get("exampleLanguage") or "java"

	@property
	def generate_index(self) -> bool:
		return bool(self._config.get("generateIndex", False))

	def build(self) -> GeneratorConfig:
		return GeneratorConfig(
			output_dir=self.output_dir,
			example_dir_base=self.example_dir_base,
			generate_front_matter=self.generate_front_matter,
			use_pygments=self.use_pygments,
			example_language=self.example_language,
			generate_index=self.generate_index,
		)


def load_config(config_path: Optional[str] = None) -> GeneratorConfig:
	"""Load config from config_path, or the packaged config.yml when omitted."""
	return GeneratorConfigLoader(config_path or DEFAULT_CONFIG_PATH).build()
