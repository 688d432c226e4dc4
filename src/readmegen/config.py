"""Optional YAML configuration.

Without a file the generator reads pom.xml, readme-template.md and
src/main/java under the project root and writes README.md there. String
values may reference environment variables as ${VAR}.

The file is taken from --config, else <root>/.readmegen/config.yaml, else
<root>/readmegen.yaml.
"""

import os
import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

# =============================================================================
# Configuration Dataclasses
# =============================================================================


@dataclass
class OutputConfig:
    """Output configuration.

    Attributes:
        path: README path, relative to the project root
    """

    path: str = "README.md"


@dataclass
class TemplateConfig:
    """Template configuration.

    Attributes:
        path: Custom template path, relative to the project root. The
            built-in template is used when this file does not exist.
    """

    path: str = "readme-template.md"


@dataclass
class SourcesConfig:
    """Source scanning configuration.

    Attributes:
        root: Directory scanned for route annotations
        extension: File suffix of scanned sources
    """

    root: str = "src/main/java"
    extension: str = ".java"

    def __post_init__(self) -> None:
        """Validate sources configuration."""
        if not self.extension.startswith("."):
            raise ValueError(f"Source extension must start with '.': {self.extension}")


@dataclass
class ManifestConfig:
    """Manifest configuration.

    Attributes:
        path: Maven POM path, relative to the project root
    """

    path: str = "pom.xml"


@dataclass
class GitConfig:
    """Git configuration.

    Attributes:
        executable: git executable name or path
    """

    executable: str = "git"


@dataclass
class DefaultsConfig:
    """Fallback values used when the manifest does not provide them.

    Attributes:
        group_id: Fallback for PROJECT_GROUP_ID
        java_version: Fallback for JAVA_SOURCE_VERSION
    """

    group_id: str = "com.googleai"
    java_version: str = "17"


@dataclass
class ReadmegenConfig:
    """Top-level readmegen configuration.

    Attributes:
        output: Output file settings
        template: Template file settings
        sources: Route scanning settings
        manifest: Manifest file settings
        git: git invocation settings
        defaults: Manifest fallbacks
    """

    output: OutputConfig = field(default_factory=OutputConfig)
    template: TemplateConfig = field(default_factory=TemplateConfig)
    sources: SourcesConfig = field(default_factory=SourcesConfig)
    manifest: ManifestConfig = field(default_factory=ManifestConfig)
    git: GitConfig = field(default_factory=GitConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)

    _config_path: Path | None = field(default=None, repr=False)

    @property
    def config_path(self) -> Path | None:
        """Get the path to the config file that was loaded."""
        return self._config_path


# =============================================================================
# Loading
# =============================================================================

CONFIG_CANDIDATES = (Path(".readmegen") / "config.yaml", Path("readmegen.yaml"))

_SECTIONS: dict[str, type] = {
    "output": OutputConfig,
    "template": TemplateConfig,
    "sources": SourcesConfig,
    "manifest": ManifestConfig,
    "git": GitConfig,
    "defaults": DefaultsConfig,
}

_ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


def _expand(text: str) -> str:
    def lookup(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in os.environ:
            raise ValueError(f"Environment variable not set: {name}")
        return os.environ[name]

    return _ENV_VAR_PATTERN.sub(lookup, text)


def substitute_env_vars(value: Any) -> Any:
    """Expand ${VAR} references in every string nested inside value.

    Raises:
        ValueError: If a referenced variable is not set
    """
    if isinstance(value, str):
        return _expand(value)
    if isinstance(value, dict):
        return {key: substitute_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [substitute_env_vars(item) for item in value]
    return value


def find_config_file(project_root: Path | None = None) -> Path | None:
    """Return the first existing CONFIG_CANDIDATES entry under project_root (cwd by default)."""
    root = (project_root or Path.cwd()).resolve()
    for candidate in CONFIG_CANDIDATES:
        if (root / candidate).exists():
            return root / candidate
    return None


def _build_section(name: str, section_type: type, data: Any) -> Any:
    if data is None:
        return section_type()
    if not isinstance(data, dict):
        raise ValueError(f"Config section '{name}' must be a mapping")

    known = {f.name for f in fields(section_type)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown key(s) in config section '{name}': {', '.join(unknown)}")

    # Blank YAML values keep the default
    return section_type(**{key: str(value) for key, value in data.items() if value is not None})


def load_config_from_dict(data: dict[str, Any]) -> ReadmegenConfig:
    """Build a configuration from parsed YAML.

    Sections that are absent keep their defaults; scalar values are read as
    strings so that `java_version: 21` behaves like `"21"`.

    Raises:
        ValueError: On unknown sections or keys, non-mapping sections or
            unset environment variables
    """
    data = substitute_env_vars(data)

    unknown = sorted(set(data) - set(_SECTIONS))
    if unknown:
        raise ValueError(f"Unknown config section(s): {', '.join(unknown)}")

    sections = {
        name: _build_section(name, section_type, data.get(name))
        for name, section_type in _SECTIONS.items()
    }
    return ReadmegenConfig(**sections)


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def load_config(
    config_path: Path | None = None,
    project_root: Path | None = None,
    auto_discover: bool = True,
) -> ReadmegenConfig:
    """Load the configuration for a run.

    Args:
        config_path: Explicit file (the --config option)
        project_root: Directory searched when auto-discovering
        auto_discover: Search CONFIG_CANDIDATES when config_path is None

    Returns:
        Loaded configuration, or defaults when no file applies

    Raises:
        FileNotFoundError: If config_path does not exist
        ValueError: If the file is invalid
    """
    if config_path is not None and not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    path = config_path
    if path is None and auto_discover:
        path = find_config_file(project_root)
    if path is None:
        return ReadmegenConfig()

    config = load_config_from_dict(_read_yaml(path))
    config._config_path = path
    return config


def create_default_config() -> str:
    """Return the commented YAML written by `readmegen init --with-config`."""
    return '''# readmegen configuration
# All paths are relative to the project root.

output:
  path: "README.md"

template:
  path: "readme-template.md"   # built-in template is used when missing

sources:
  root: "src/main/java"
  extension: ".java"

manifest:
  path: "pom.xml"

git:
  executable: "git"

# Used when pom.xml does not define them
defaults:
  group_id: "com.googleai"
  java_version: "17"
'''
