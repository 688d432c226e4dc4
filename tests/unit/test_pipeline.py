"""Unit tests for the generation pipeline."""

from collections.abc import Callable, Sequence
from datetime import datetime
from pathlib import Path

import pytest

from readmegen.collectors.environment import EnvironmentProbe
from readmegen.collectors.routes import NO_MAPPED_ENDPOINTS, NO_SOURCE_DIRECTORY
from readmegen.config import ReadmegenConfig, load_config_from_dict
from readmegen.errors import OutputWriteError, TemplateError
from readmegen.models.metadata import PLACEHOLDERS
from readmegen.pipeline import GenerationOptions, GenerationPipeline
from readmegen.utils.process import NOT_AVAILABLE, ProcessRunner


class UnavailableRunner(ProcessRunner):
    """Runner for which every command fails."""

    def run(self, cwd: Path, argv: Sequence[str]) -> str:
        return NOT_AVAILABLE


def _pipeline(config: ReadmegenConfig | None = None) -> GenerationPipeline:
    runner = UnavailableRunner()
    environment = EnvironmentProbe(runner, clock=lambda: datetime(2024, 1, 15, 12, 0, 0))
    return GenerationPipeline(config=config, runner=runner, environment=environment)


class TestGenerationOptions:
    """Tests for GenerationOptions."""

    def test_default_options(self) -> None:
        """Test default options."""
        options = GenerationOptions()

        assert options.project_root == Path.cwd()
        assert options.cli_args == ()
        assert options.output_path is None
        assert options.dry_run is False


class TestCollect:
    """Tests for metadata collection."""

    def test_every_key_resolved_without_inputs(self, project_root: Path) -> None:
        """Test that an empty project still yields a value for every key."""
        meta = _pipeline().collect(project_root)

        assert list(meta) == list(PLACEHOLDERS)
        assert all(isinstance(value, str) for value in meta.values())
        assert meta["PROJECT_NAME"] == "Unknown"
        assert meta["PROJECT_VERSION"] == "0.0.1"
        assert meta["SPRING_BOOT_VERSION"] == "N/A"
        assert meta["ENDPOINTS_TABLE"] == NO_SOURCE_DIRECTORY
        assert meta["BUILD_TIME"] == "2024-01-15 12:00:00"

    def test_git_unavailable(self, project_root: Path) -> None:
        """Test that failing git yields N/A for all git keys."""
        meta = _pipeline().collect(project_root)

        assert meta["GIT_BRANCH"] == meta["GIT_COMMIT"] == meta["GIT_MESSAGE"] == "N/A"

    def test_sample_project(self, spring_project: Path) -> None:
        """Test collection against the shipped sample project."""
        meta = _pipeline().collect(spring_project)

        assert meta["PROJECT_NAME"] == "Demo Service"
        assert meta["SPRING_BOOT_VERSION"] == "3.2.5"
        assert "| `GET` | `/api/v1/health` | `HealthController.java::health()` |" in (
            meta["ENDPOINTS_TABLE"]
        )

    def test_configured_paths(
        self, project_root: Path, write_file: Callable[[str, str], Path]
    ) -> None:
        """Test that config relocates the manifest and source root."""
        write_file("build/project.xml", "<project><name>Relocated</name></project>")
        write_file("app/Api.java", '@GetMapping("/x") public String x() {}')
        config = load_config_from_dict(
            {"manifest": {"path": "build/project.xml"}, "sources": {"root": "app"}}
        )

        meta = _pipeline(config).collect(project_root)

        assert meta["PROJECT_NAME"] == "Relocated"
        assert "`/x`" in meta["ENDPOINTS_TABLE"]

    def test_empty_source_tree(self, project_root: Path) -> None:
        """Test the sentinel for a source tree without Java files."""
        (project_root / "src" / "main" / "java").mkdir(parents=True)

        meta = _pipeline().collect(project_root)

        assert meta["ENDPOINTS_TABLE"] == NO_MAPPED_ENDPOINTS


class TestRun:
    """Tests for full pipeline runs."""

    def test_writes_readme_with_builtin_template(self, project_root: Path) -> None:
        """Test a run without manifest, arguments or template."""
        result = _pipeline().run(GenerationOptions(project_root=project_root))

        readme = project_root / "README.md"
        assert result.written
        assert result.output_path == readme.resolve()
        assert result.template.is_builtin
        content = readme.read_text(encoding="utf-8")
        assert content.startswith("# 🚀 Unknown\n")
        for key in PLACEHOLDERS:
            assert "{{" + key + "}}" not in content

    def test_custom_template(
        self, project_root: Path, write_file: Callable[[str, str], Path]
    ) -> None:
        """Test that a custom template is used and unknown tokens survive."""
        write_file("readme-template.md", "# {{PROJECT_NAME}} {{UNDEFINED}}")

        result = _pipeline().run(GenerationOptions(project_root=project_root, cli_args=["X"]))

        assert not result.template.is_builtin
        assert (project_root / "README.md").read_text(encoding="utf-8") == "# X {{UNDEFINED}}"

    def test_substituted_values_not_expanded(
        self, project_root: Path, write_file: Callable[[str, str], Path]
    ) -> None:
        """Test that a value containing a placeholder is written verbatim."""
        write_file("readme-template.md", "{{PROJECT_NAME}}|{{PROJECT_VERSION}}")

        result = _pipeline().run(
            GenerationOptions(project_root=project_root, cli_args=["{{PROJECT_VERSION}}"])
        )

        assert result.content == "{{PROJECT_VERSION}}|0.0.1"

    def test_manifest_scenario(
        self,
        project_root: Path,
        write_file: Callable[[str, str], Path],
        pom_xml: str,
    ) -> None:
        """Test root version vs parent version through a full run."""
        write_file("pom.xml", pom_xml)
        write_file(
            "readme-template.md",
            "{{PROJECT_NAME}} {{PROJECT_VERSION}} {{SPRING_BOOT_VERSION}}",
        )

        result = _pipeline().run(GenerationOptions(project_root=project_root))

        assert result.content == "MyApp 1.2.3 3.1.0"

    def test_malformed_manifest_does_not_fail(
        self, project_root: Path, write_file: Callable[[str, str], Path]
    ) -> None:
        """Test that a malformed manifest still produces a README."""
        write_file("pom.xml", "<project><name>")

        result = _pipeline().run(GenerationOptions(project_root=project_root, cli_args=["Cli"]))

        assert result.written
        assert result.metadata["PROJECT_NAME"] == "Cli"

    def test_dry_run(self, project_root: Path) -> None:
        """Test that dry runs render without writing."""
        result = _pipeline().run(GenerationOptions(project_root=project_root, dry_run=True))

        assert not result.written
        assert "Unknown" in result.content
        assert not (project_root / "README.md").exists()

    def test_output_override(self, project_root: Path, tmp_path: Path) -> None:
        """Test writing to an explicit output path."""
        output = tmp_path / "out" / "DOCS.md"

        result = _pipeline().run(GenerationOptions(project_root=project_root, output_path=output))

        assert result.output_path == output
        assert output.exists()

    def test_unreadable_template_is_fatal(self, project_root: Path) -> None:
        """Test that a template that cannot be read propagates."""
        (project_root / "readme-template.md").mkdir()

        with pytest.raises(TemplateError):
            _pipeline().run(GenerationOptions(project_root=project_root))

    def test_write_failure_is_fatal(self, project_root: Path) -> None:
        """Test that an unwritable output propagates."""
        (project_root / "README.md").mkdir()

        with pytest.raises(OutputWriteError):
            _pipeline().run(GenerationOptions(project_root=project_root))
