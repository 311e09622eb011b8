"""Load docsync.yaml: which examples to render and where the docs live.

Every key is optional; a missing manifest yields the defaults below, which
describe a Rust crate with programs under examples/, a README.md carrying
an "## Examples" section and a src/lib.rs whose header is a //! block.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from pathlib import Path

import yaml

from docsync_engine.errors import ConfigurationError


@dataclass(frozen=True)
class Anchor:
    """Start and end boundary of a replaceable span in a document."""

    start: str
    end: str


@dataclass
class ExamplesConfig:
    directory: str = "examples"
    pattern: str = "*.rs"
    language: str = "rust"
    entry_pattern: str = "fn main"
    priority: list[str] = field(default_factory=list)
    skip_missing: bool = False
    strict: bool = False


@dataclass
class PrimaryConfig:
    path: str = "README.md"
    start_marker: str = "## Examples"
    end_marker: str = "*"
    excerpt_start: str = "This crate "
    excerpt_end: str = r"## Crates\.io"

    @property
    def anchor(self) -> Anchor:
        return Anchor(self.start_marker, self.end_marker)


@dataclass
class SecondaryConfig:
    path: str = "src/lib.rs"
    header_prefix: str = "//! "


@dataclass
class SyncConfig:
    examples: ExamplesConfig = field(default_factory=ExamplesConfig)
    primary: PrimaryConfig = field(default_factory=PrimaryConfig)
    secondary: SecondaryConfig = field(default_factory=SecondaryConfig)


_SECTIONS = {
    "examples": ExamplesConfig,
    "primary": PrimaryConfig,
    "secondary": SecondaryConfig,
}


# Keys compiled as regular expressions
_PATTERN_KEYS = {"entry_pattern", "excerpt_start", "excerpt_end"}


def _check_value(name: str, key: str, value, default) -> None:
    where = f"'{name}.{key}'"
    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise ConfigurationError(f"{where} must be true or false, got {value!r}")
    elif isinstance(default, str):
        if not isinstance(value, str):
            raise ConfigurationError(f"{where} must be a string, got {value!r}")
        if key in _PATTERN_KEYS:
            try:
                re.compile(value)
            except re.error as e:
                raise ConfigurationError(f"{where} is not a valid pattern: {e}") from e


def _build_section(name: str, cls: type, raw) -> object:
    if raw is None:
        return cls()
    if not isinstance(raw, dict):
        raise ConfigurationError(f"'{name}' must be a mapping, got {type(raw).__name__}")

    known = {f.name for f in fields(cls)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ConfigurationError(f"'{name}': unknown key(s) {', '.join(unknown)}")

    if "priority" in raw:
        priority = raw["priority"] or []
        if not isinstance(priority, list) or not all(isinstance(p, str) for p in priority):
            raise ConfigurationError(f"'{name}.priority' must be a list of file names")
        raw = {**raw, "priority": list(priority)}

    defaults = cls()
    for key, value in raw.items():
        _check_value(name, key, value, getattr(defaults, key))

    return cls(**raw)


def parse_config(data: dict | None) -> SyncConfig:
    """Build a SyncConfig from a parsed manifest mapping."""
    if data is None:
        return SyncConfig()
    if not isinstance(data, dict):
        raise ConfigurationError("docsync.yaml is not a YAML mapping")

    unknown = sorted(set(data) - set(_SECTIONS))
    if unknown:
        raise ConfigurationError(f"Unknown section(s) in docsync.yaml: {', '.join(unknown)}")

    return SyncConfig(**{
        name: _build_section(name, cls, data.get(name))
        for name, cls in _SECTIONS.items()
    })


def load_config(path: Path | str | None = None) -> SyncConfig:
    """Load docsync.yaml from disk.

    Args:
        path: Path to the manifest. None or a missing file means defaults.

    Returns:
        Parsed SyncConfig.

    Raises:
        ConfigurationError: If the YAML is malformed or has unknown keys.
    """
    if path is None:
        return SyncConfig()
    manifest = Path(path)
    if not manifest.is_file():
        return SyncConfig()

    try:
        with open(manifest) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse {manifest}: {e}") from e

    return parse_config(data)
