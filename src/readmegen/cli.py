"""readmegen CLI interface.

Commands:
- generate: Render README.md for a project
- check: Report availability of git and java
- init: Write the built-in template for customisation
- placeholders: List the available placeholders
- routes: Print the endpoints found in the Java sources

Global options:
- --config: Path to configuration file
- --verbose: Enable verbose output with timestamps
- --quiet: Suppress info messages
- --ci: JSON log output
- --version: Show version and exit

`readme-generator` is the single-command form of `generate` used from
build plugins: readme-generator [NAME] [ARTIFACT_ID] [VERSION] [DESCRIPTION]
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from readmegen import __version__
from readmegen.config import ReadmegenConfig, create_default_config, load_config
from readmegen.errors import ReadmegenError
from readmegen.utils.logging import colors_enabled, configure_from_cli, get_logger

app = typer.Typer(
    name="readmegen",
    help="Build-time README generator for Maven/Spring projects",
    add_completion=False,
    no_args_is_help=True,
)

# Global state
_config_path: Path | None = None
_logger = get_logger()

BANNER = (
    "\n╔══════════════════════════════════════════╗\n"
    f"║       README Auto-Generator v{__version__:<12}║\n"
    "╚══════════════════════════════════════════╝"
)


def _echo(message: str, color: str | None = None, err: bool = False) -> None:
    """Echo a console line, colored when the terminal allows it."""
    if color and colors_enabled():
        message = typer.style(message, fg=color)
    typer.echo(message, err=err)


def _load_config(project_root: Path, config_path: Path | None = None) -> ReadmegenConfig:
    """Load configuration for a project root or exit with code 1."""
    try:
        config = load_config(config_path=config_path, project_root=project_root)
    except FileNotFoundError as e:
        _logger.error(str(e))
        raise typer.Exit(1)
    except ValueError as e:
        _logger.error(f"Failed to load config: {e}")
        raise typer.Exit(1)

    if config.config_path:
        _logger.debug(f"Loaded config from: {config.config_path}")
    return config


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"readmegen {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output with timestamps",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress info messages (warnings and errors only)",
        ),
    ] = False,
    ci: Annotated[
        bool,
        typer.Option(
            "--ci",
            help="Enable CI mode with JSON log output",
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """readmegen - README generator for Maven/Spring projects.

    Collects metadata from pom.xml, the host, git and the Java sources and
    renders it into README.md.
    """
    global _config_path

    configure_from_cli(verbose=verbose, quiet=quiet, ci=ci)
    _config_path = config


# =============================================================================
# generate command
# =============================================================================


def run_generate(
    cli_args: list[str],
    root: Path,
    output: Path | None = None,
    template: Path | None = None,
    dry_run: bool = False,
    config_path: Path | None = None,
) -> None:
    """Generate the README and print banner and summary.

    Exit codes:
        0: README written (or previewed with --dry-run)
        1: Template could not be read or README could not be written
    """
    from readmegen.pipeline import GenerationOptions, GenerationPipeline

    _echo(BANNER, typer.colors.CYAN)

    project_root = root.resolve()
    config = _load_config(project_root, config_path)

    options = GenerationOptions(
        project_root=project_root,
        cli_args=cli_args,
        output_path=output,
        template_path=template,
        dry_run=dry_run,
    )

    try:
        result = GenerationPipeline(config=config).run(options)
    except ReadmegenError as e:
        _logger.error(str(e))
        raise typer.Exit(1)

    meta = result.metadata
    if dry_run:
        typer.echo("\n--- README Preview ---\n")
        typer.echo(result.content)
        typer.echo("--- End Preview ---")
        _logger.info("Dry run complete - no files written")
        raise typer.Exit(0)

    _echo("\n  ✅ README.md generated successfully!", typer.colors.GREEN)
    _echo(f"     Location : {result.output_path.absolute()}", typer.colors.GREEN)
    _echo(
        f"     Project  : {meta['PROJECT_NAME']} v{meta['PROJECT_VERSION']}",
        typer.colors.GREEN,
    )
    _echo(f"     Built on : {meta['BUILD_TIME']}\n", typer.colors.GREEN)
    raise typer.Exit(0)


@app.command()
def generate(
    name: Annotated[
        str | None,
        typer.Argument(help="Project display name (fallback when pom.xml has none)"),
    ] = None,
    artifact_id: Annotated[
        str | None,
        typer.Argument(help="Artifact ID fallback"),
    ] = None,
    version: Annotated[
        str | None,
        typer.Argument(help="Version fallback"),
    ] = None,
    description: Annotated[
        str | None,
        typer.Argument(help="Description fallback"),
    ] = None,
    root: Annotated[
        Path,
        typer.Option(
            "--root",
            "-r",
            help="Project root (holds pom.xml, receives README.md)",
            exists=True,
            file_okay=False,
        ),
    ] = Path("."),
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path (overrides config)"),
    ] = None,
    template: Annotated[
        Path | None,
        typer.Option("--template", "-t", help="Template file path (overrides config)"),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Print the rendered README without writing it"),
    ] = False,
) -> None:
    """Generate README.md for a project.

    Positional arguments seed the project fields; pom.xml values win when present.
    """
    cli_args = [arg for arg in (name, artifact_id, version, description) if arg is not None]
    run_generate(
        cli_args,
        root,
        output=output,
        template=template,
        dry_run=dry_run,
        config_path=_config_path,
    )


# =============================================================================
# check command
# =============================================================================


@app.command()
def check(
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output results as JSON"),
    ] = False,
    root: Annotated[
        Path,
        typer.Option("--root", "-r", help="Project root", exists=True, file_okay=False),
    ] = Path("."),
) -> None:
    """Report availability of the tools readmegen consults.

    Exit codes:
        0: git and java available
        2: Some tools missing (their placeholders will be N/A)
    """
    from readmegen.utils.preflight import PreflightChecker

    config = _load_config(root.resolve(), _config_path)
    result = PreflightChecker().check_all(git_executable=config.git.executable)

    if json_output:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        raise typer.Exit(0 if result.ready else 2)

    typer.echo("\n🔍 Tool Check\n")
    for tool in result.checks:
        if tool.available:
            typer.echo(f"  ✅ {tool.name} ({tool.version or 'version unknown'})")
            typer.echo(f"     └─ {tool.path}")
        else:
            typer.echo(f"  ❌ {tool.name}")
            typer.echo(f"     └─ {tool.message}")
    typer.echo()

    if not result.ready:
        _echo("⚠️  Some sections will show N/A", typer.colors.YELLOW)
        raise typer.Exit(2)

    _echo("✅ All tools available", typer.colors.GREEN)
    raise typer.Exit(0)


# =============================================================================
# init command
# =============================================================================


@app.command()
def init(
    root: Annotated[
        Path,
        typer.Option("--root", "-r", help="Project root", exists=True, file_okay=False),
    ] = Path("."),
    with_config: Annotated[
        bool,
        typer.Option("--with-config", help="Also write a default readmegen.yaml"),
    ] = False,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite existing files"),
    ] = False,
) -> None:
    """Write the built-in template to readme-template.md for customisation."""
    from readmegen.templates import BUILTIN_TEMPLATE

    project_root = root.resolve()
    config = _load_config(project_root, _config_path)

    targets = [(project_root / config.template.path, BUILTIN_TEMPLATE)]
    if with_config:
        targets.append((project_root / "readmegen.yaml", create_default_config()))

    for path, _ in targets:
        if path.exists() and not force:
            _logger.error(f"File already exists: {path}")
            _logger.info("Use --force to overwrite")
            raise typer.Exit(1)

    for path, content in targets:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            _logger.error(f"Could not write {path}: {e}")
            raise typer.Exit(1)
        _logger.info(f"Created {path}")

    typer.echo("\n✅ readmegen initialized")
    typer.echo(f"   Template: {targets[0][0]}")
    raise typer.Exit(0)


# =============================================================================
# placeholders command
# =============================================================================


@app.command()
def placeholders(
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output placeholders as JSON"),
    ] = False,
) -> None:
    """List every placeholder a template may use."""
    from readmegen.models import PLACEHOLDERS

    if json_output:
        typer.echo(json.dumps(PLACEHOLDERS, indent=2))
        return

    width = max(len(key) for key in PLACEHOLDERS) + 4
    for key, description in PLACEHOLDERS.items():
        token = "{{" + key + "}}"
        typer.echo(f"{token:<{width}} {description}")


# =============================================================================
# routes command
# =============================================================================


@app.command()
def routes(
    root: Annotated[
        Path,
        typer.Option("--root", "-r", help="Project root", exists=True, file_okay=False),
    ] = Path("."),
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output routes as JSON"),
    ] = False,
) -> None:
    """Print the endpoints found in the project's Java sources."""
    from readmegen.collectors import RouteScanner

    project_root = root.resolve()
    config = _load_config(project_root, _config_path)
    scanner = RouteScanner(config.sources.extension)
    source_root = project_root / config.sources.root

    if json_output:
        found = scanner.scan(source_root)
        typer.echo(json.dumps([route.to_dict() for route in found], indent=2))
        return

    typer.echo(scanner.build_table(source_root))


# =============================================================================
# readme-generator entry point
# =============================================================================

generator_app = typer.Typer(
    name="readme-generator",
    help="Generate README.md in the current directory",
    add_completion=False,
)


@generator_app.command()
def readme_generator(
    name: Annotated[str | None, typer.Argument(help="Project display name")] = None,
    artifact_id: Annotated[str | None, typer.Argument(help="Artifact ID")] = None,
    version: Annotated[str | None, typer.Argument(help="Version")] = None,
    description: Annotated[str | None, typer.Argument(help="Description")] = None,
) -> None:
    """Generate README.md in the current directory (the project root)."""
    configure_from_cli()
    cli_args = [arg for arg in (name, artifact_id, version, description) if arg is not None]
    run_generate(cli_args, Path.cwd())


if __name__ == "__main__":
    app()
