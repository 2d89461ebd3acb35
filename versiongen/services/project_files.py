"""
Project file version readers for versiongen.

Reads the version a project declares for itself so it can be compared
with the tag being released:
- Rust: ``[package] version`` in Cargo.toml
- Python: ``[metadata] version`` in setup.cfg, else ``[project] version``
  in pyproject.toml

A missing file means "no version declared". A file that exists but has no
usable version is an error.
"""

import configparser
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple
import logging

import toml

from ..exit_codes import ProjectFileError

logger = logging.getLogger(__name__)


CARGO_TOML = "Cargo.toml"
SETUP_CFG = "setup.cfg"
PYPROJECT_TOML = "pyproject.toml"


@dataclass(frozen=True)
class ProjectVersions:
    """Versions declared by project files, None where not declared."""
    rust_crate_version: Optional[str] = None
    python_module_version: Optional[str] = None
    python_source: Optional[str] = None

    def candidates(self) -> Tuple[Tuple[str, str], ...]:
        """(filename, version) pairs to check against a tag, Cargo.toml first."""
        found = []
        if self.rust_crate_version is not None:
            found.append((CARGO_TOML, self.rust_crate_version))
        if self.python_module_version is not None:
            found.append((self.python_source or SETUP_CFG, self.python_module_version))
        return tuple(found)


def _load_toml(path: Path) -> Optional[dict]:
    try:
        return toml.load(path)
    except FileNotFoundError:
        return None
    except toml.TomlDecodeError as e:
        raise ProjectFileError(path.name, f"invalid TOML: {e}") from e


def crate_version(repo_path: str) -> Optional[str]:
    """
    Version of the crate in ``Cargo.toml``.

    Returns None when there is no Cargo.toml or it is a workspace manifest.

    Raises:
        ProjectFileError: no [package] section or no version in it
    """
    data = _load_toml(Path(repo_path) / CARGO_TOML)
    if data is None:
        return None
    if 'workspace' in data:
        return None
    package = data.get('package')
    if not isinstance(package, dict):
        raise ProjectFileError(CARGO_TOML, "could not find package section")
    version = package.get('version')
    if version is None:
        raise ProjectFileError(CARGO_TOML, "could not find version in package section")
    if not isinstance(version, str):
        # version.workspace = true and friends
        raise ProjectFileError(CARGO_TOML, "version in package section is not a string")
    return version


def setup_cfg_version(repo_path: str) -> Optional[str]:
    """
    ``[metadata] version`` from setup.cfg.

    Raises:
        ProjectFileError: file exists but has no metadata.version
    """
    path = Path(repo_path) / SETUP_CFG
    if not path.exists():
        return None

    config_parser = configparser.ConfigParser()
    try:
        config_parser.read(path)
    except configparser.Error as e:
        raise ProjectFileError(SETUP_CFG, f"parse error: {e}") from e

    version = config_parser.get('metadata', 'version', fallback=None)
    if not version:
        raise ProjectFileError(SETUP_CFG, "could not find metadata.version")
    return version.strip()


def pyproject_version(repo_path: str) -> Optional[str]:
    """
    Static ``[project] version`` from pyproject.toml.

    Dynamic versions and non-PEP 621 files yield None.
    """
    data = _load_toml(Path(repo_path) / PYPROJECT_TOML)
    if data is None:
        return None
    project = data.get('project')
    version = project.get('version') if isinstance(project, dict) else None
    return version if isinstance(version, str) else None


def read_project_versions(repo_path: str) -> ProjectVersions:
    """Read all supported project files in ``repo_path``."""
    rust = crate_version(repo_path)

    python = setup_cfg_version(repo_path)
    source = SETUP_CFG if python is not None else None
    if python is None:
        python = pyproject_version(repo_path)
        source = PYPROJECT_TOML if python is not None else None

    if rust or python:
        logger.debug(f"Project versions: rust={rust} python={python} ({source})")

    return ProjectVersions(
        rust_crate_version=rust,
        python_module_version=python,
        python_source=source,
    )
