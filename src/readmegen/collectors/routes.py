"""Spring MVC route extraction from Java sources.

Routes are found textually, not by parsing Java. The patterns are fixed
because the generated README depends on them, and they carry known
approximations:
- multi-value annotations (value="/x", produces=...) may capture oddly
- annotations inside comments are matched
- path variables such as {id} are kept verbatim
"""

import logging
import re
from pathlib import Path

from readmegen.models.route import NO_HANDLER, Route

logger = logging.getLogger(__name__)

NO_SOURCE_DIRECTORY = "_No source directory found._"
NO_MAPPED_ENDPOINTS = "_No mapped endpoints found._"

TABLE_HEADER = "| Method | Endpoint | Handler |\n|--------|----------|---------|\n"

CLASS_MAPPING = re.compile(r"@RequestMapping\s*\(\s*[\"']?(/[^\"')]+)[\"']?")
METHOD_MAPPING = re.compile(
    r"@(GetMapping|PostMapping|PutMapping|DeleteMapping|PatchMapping)"
    r"\s*\(?\s*[\"']?(/[^\"')]*)[\"']?"
)
HANDLER_SIGNATURE = re.compile(r"public\s+[\w<>,\s]+\s+(\w+)\s*\(")


class RouteScanner:
    """Scans a source tree for Spring mapping annotations.

    Files are visited in lexicographic order of their full path and matches
    are reported in textual order, so repeated scans are byte-identical.

    Usage:
        scanner = RouteScanner()
        table = scanner.build_table(Path("src/main/java"))
    """

    def __init__(self, extension: str = ".java") -> None:
        """Initialize the scanner.

        Args:
            extension: Suffix of files to scan
        """
        self.extension = extension

    def source_files(self, source_root: Path) -> list[Path]:
        """List scannable files under source_root in deterministic order."""
        files = [
            path
            for path in source_root.rglob("*")
            if str(path).endswith(self.extension) and path.is_file()
        ]
        return sorted(files, key=str)

    def scan_source(self, source: str, file_name: str) -> list[Route]:
        """Extract routes from the text of one source file.

        Args:
            source: File content
            file_name: Name reported in the handler column

        Returns:
            Routes in order of appearance
        """
        base_path = ""
        class_match = CLASS_MAPPING.search(source)
        if class_match:
            base_path = class_match.group(1).strip()

        routes: list[Route] = []
        for match in METHOD_MAPPING.finditer(source):
            verb = match.group(1).replace("Mapping", "").upper()
            path = base_path + match.group(2).strip()

            handler = NO_HANDLER
            signature = HANDLER_SIGNATURE.search(source, match.end())
            if signature:
                handler = f"{signature.group(1)}()"

            routes.append(Route(verb=verb, path=path, source_file=file_name, handler=handler))

        return routes

    def scan(self, source_root: Path) -> list[Route]:
        """Extract routes from every source file under source_root.

        Unreadable files are skipped.

        Args:
            source_root: Directory to walk

        Returns:
            All routes, ordered by file path then by position in the file
        """
        routes: list[Route] = []
        if not source_root.is_dir():
            return routes

        for path in self.source_files(source_root):
            try:
                source = path.read_text(encoding="utf-8", errors="replace")
            except OSError as e:
                logger.debug("Skipping unreadable source %s: %s", path, e)
                continue
            found = self.scan_source(source, path.name)
            if found:
                logger.debug("Found %d route(s) in %s", len(found), path.name)
            routes.extend(found)

        return routes

    def build_table(self, source_root: Path) -> str:
        """Render the markdown endpoints table for source_root.

        Returns:
            The table, NO_SOURCE_DIRECTORY if source_root does not exist, or
            NO_MAPPED_ENDPOINTS if no route was found
        """
        if not source_root.exists():
            return NO_SOURCE_DIRECTORY

        routes = self.scan(source_root)
        return render_table(routes)


def render_table(routes: list[Route]) -> str:
    """Render routes as a markdown table, or the no-endpoints sentinel."""
    if not routes:
        return NO_MAPPED_ENDPOINTS
    return TABLE_HEADER + "".join(route.to_row() for route in routes)


def scan_routes(source_root: Path, extension: str = ".java") -> list[Route]:
    """Scan source_root with a default RouteScanner."""
    return RouteScanner(extension).scan(source_root)


def build_endpoints_table(source_root: Path, extension: str = ".java") -> str:
    """Build the ENDPOINTS_TABLE value for source_root."""
    return RouteScanner(extension).build_table(source_root)
