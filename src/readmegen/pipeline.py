"""README generation pipeline.

Sequences the collectors, assembles the metadata map, then renders and
writes the README. Collection is best-effort: every collector absorbs its
own failures, so only template reading and the final write can fail.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from readmegen.collectors import EnvironmentProbe, GitProbe, ManifestParser, RouteScanner
from readmegen.config import ReadmegenConfig
from readmegen.models.metadata import MetadataMap, ensure_complete, missing_keys
from readmegen.templates.renderer import DocumentRenderer, LoadedTemplate, TemplateLoader
from readmegen.utils.process import ProcessRunner

logger = logging.getLogger(__name__)


@dataclass
class GenerationOptions:
    """Options for a single generator run.

    Attributes:
        project_root: Directory holding pom.xml and receiving README.md
        cli_args: Positional name, artifact ID, version and description
        output_path: Output override (config output.path when None)
        template_path: Template override (config template.path when None)
        dry_run: Render without writing the output file
    """

    project_root: Path = field(default_factory=Path.cwd)
    cli_args: Sequence[str] = ()
    output_path: Path | None = None
    template_path: Path | None = None
    dry_run: bool = False


@dataclass
class GenerationResult:
    """Outcome of a generator run.

    Attributes:
        metadata: Complete metadata map used for rendering
        content: Rendered README
        output_path: Where the README was (or would be) written
        template: Template that was rendered
        written: Whether the output file was written
    """

    metadata: MetadataMap
    content: str
    output_path: Path
    template: LoadedTemplate
    written: bool = False


class GenerationPipeline:
    """Collects metadata and renders the README.

    Usage:
        pipeline = GenerationPipeline(config)
        result = pipeline.run(GenerationOptions(project_root=Path(".")))
    """

    def __init__(
        self,
        config: ReadmegenConfig | None = None,
        runner: ProcessRunner | None = None,
        environment: EnvironmentProbe | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            config: readmegen configuration (defaults when None)
            runner: Process runner shared by the git and java queries
            environment: Environment probe (built from runner when None)
        """
        self.config = config or ReadmegenConfig()
        self.runner = runner or ProcessRunner()
        self.manifest_parser = ManifestParser(self.config.defaults)
        self.environment = environment or EnvironmentProbe(self.runner)
        self.git = GitProbe(self.runner, self.config.git.executable)
        self.route_scanner = RouteScanner(self.config.sources.extension)

    def collect(self, project_root: Path, cli_args: Sequence[str] = ()) -> MetadataMap:
        """Build the complete metadata map for a project.

        Args:
            project_root: Project root directory
            cli_args: Positional generator arguments

        Returns:
            Metadata with a value for every placeholder key
        """
        meta: MetadataMap = {}

        logger.debug("Reading manifest")
        meta.update(
            self.manifest_parser.parse(project_root / self.config.manifest.path, cli_args)
        )

        logger.debug("Probing environment")
        meta.update(self.environment.collect(project_root))

        logger.debug("Querying git")
        meta.update(self.git.collect(project_root))

        logger.debug("Scanning routes")
        meta["ENDPOINTS_TABLE"] = self.route_scanner.build_table(
            project_root / self.config.sources.root
        )

        absent = missing_keys(meta)
        if absent:
            logger.debug("Using sentinels for: %s", ", ".join(absent))
        return ensure_complete(meta)

    def run(self, options: GenerationOptions) -> GenerationResult:
        """Collect, render and (unless dry-run) write the README.

        Args:
            options: Run options

        Returns:
            GenerationResult describing the run

        Raises:
            TemplateError: If an existing template cannot be read
            OutputWriteError: If the README cannot be written
        """
        project_root = options.project_root.resolve()
        output_path = options.output_path or project_root / self.config.output.path
        template_path = options.template_path or project_root / self.config.template.path

        meta = self.collect(project_root, options.cli_args)
        for key, value in meta.items():
            logger.debug("%s = %s", key, value if "\n" not in value else "<multi-line>")

        renderer = DocumentRenderer(TemplateLoader(template_path))
        template = renderer.loader.load()
        content = renderer.render(meta, template)

        if options.dry_run:
            return GenerationResult(
                metadata=meta,
                content=content,
                output_path=output_path,
                template=template,
            )

        renderer.render_to_file(meta, output_path, template)
        return GenerationResult(
            metadata=meta,
            content=content,
            output_path=output_path,
            template=template,
            written=True,
        )
