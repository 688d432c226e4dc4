"""Shared pytest fixtures for readmegen tests.

Fixtures are organized by category:
- Path fixtures: Sample projects shipped with the tests
- Project fixtures: Throwaway project roots built in tmp_path
- Tool fixtures: Fake executables placed on PATH
- Logging fixtures: Isolation from CLI logging setup
"""

import logging
import os
import stat
import sys
import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

from tests.fixtures import SPRING_PROJECT_PATH

# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def spring_project() -> Path:
    """Return the path to the sample Spring project."""
    return SPRING_PROJECT_PATH


# =============================================================================
# Project Fixtures
# =============================================================================


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Create an empty project root."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def write_file(project_root: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes dedented text below the project root."""

    def _write(relative: str, content: str) -> Path:
        path = project_root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def pom_xml() -> str:
    """Return a POM whose <version> appears at root and under <parent>."""
    return """\
<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0">
    <modelVersion>4.0.0</modelVersion>
    <parent>
        <groupId>org.springframework.boot</groupId>
        <artifactId>spring-boot-starter-parent</artifactId>
        <version>3.1.0</version>
    </parent>
    <groupId>com.acme</groupId>
    <artifactId>my-app</artifactId>
    <version>1.2.3</version>
    <name>MyApp</name>
    <description>An application</description>
    <properties>
        <java.version>21</java.version>
    </properties>
</project>
"""


@pytest.fixture
def controller_source() -> str:
    """Return a Spring controller with a class-level base path."""
    return """\
package com.acme.web;

import org.springframework.web.bind.annotation.*;

@RestController
@RequestMapping("/api/v1")
public class StatusController {

    @GetMapping("/health")
    public ResponseEntity<Map<String, Object>> health() {
        return ResponseEntity.ok(Map.of());
    }

    @DeleteMapping("/items/{id}")
    public void remove(@PathVariable long id) {
    }
}
"""


# =============================================================================
# Tool Fixtures
# =============================================================================


@pytest.fixture
def fake_bin(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Callable[[str, str], Path]:
    """Return a helper that installs a fake executable at the front of PATH.

    The helper takes the command name and a POSIX shell script body.
    """
    if sys.platform == "win32":
        pytest.skip("fake executables require a POSIX shell")

    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")

    def _install(name: str, body: str) -> Path:
        script = bin_dir / name
        script.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return _install


# =============================================================================
# Logging Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_readmegen_logger() -> None:
    """Undo CLI logging setup so caplog sees readmegen records."""
    logger = logging.getLogger("readmegen")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
