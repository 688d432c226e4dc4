"""Maven manifest (pom.xml) metadata extraction.

A POM repeats tag names at different depths: <version> and <artifactId>
appear both on the project and inside <parent>. Project fields therefore
take the first element whose direct parent is not <parent>, while
SPRING_BOOT_VERSION is read from <parent> explicitly.

Tags are matched by local name, so the usual default namespace
(xmlns="http://maven.apache.org/POM/4.0.0") does not matter.
"""

import logging
import xml.etree.ElementTree as ET
from collections.abc import Sequence
from pathlib import Path

from readmegen.config import DefaultsConfig
from readmegen.models.metadata import NOT_AVAILABLE, UNKNOWN, MetadataMap

logger = logging.getLogger(__name__)

# (key, fallback) pairs seeded from positional CLI arguments, in argument order
CLI_FIELDS: tuple[tuple[str, str], ...] = (
    ("PROJECT_NAME", UNKNOWN),
    ("PROJECT_ARTIFACT_ID", "unknown"),
    ("PROJECT_VERSION", "0.0.1"),
    ("PROJECT_DESCRIPTION", ""),
)

# Manifest tag for each CLI-seeded key
_PROJECT_TAGS: dict[str, str] = {
    "PROJECT_NAME": "name",
    "PROJECT_ARTIFACT_ID": "artifactId",
    "PROJECT_VERSION": "version",
    "PROJECT_DESCRIPTION": "description",
}


def _local_name(tag: object) -> str:
    """Strip an ElementTree "{namespace}" prefix from a tag."""
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _text_content(element: ET.Element) -> str:
    """Return all descendant text of an element, trimmed."""
    return "".join(element.itertext()).strip()


class ManifestParser:
    """Extracts project metadata from a Maven POM.

    Usage:
        parser = ManifestParser()
        meta = parser.parse(Path("pom.xml"), ["My App", "my-app"])
    """

    def __init__(self, defaults: DefaultsConfig | None = None) -> None:
        """Initialize the parser.

        Args:
            defaults: Fallbacks for group ID and Java source version
        """
        self.defaults = defaults or DefaultsConfig()

    def seed(self, cli_args: Sequence[str] = ()) -> MetadataMap:
        """Build the values used when the manifest is missing or unreadable.

        Positional arguments 0..3 seed name, artifact ID, version and
        description; absent arguments take their fallbacks.

        Args:
            cli_args: Positional generator arguments

        Returns:
            Seeded metadata for all manifest-derived keys
        """
        meta: MetadataMap = {}
        for index, (key, fallback) in enumerate(CLI_FIELDS):
            meta[key] = cli_args[index] if len(cli_args) > index else fallback

        meta["PROJECT_GROUP_ID"] = self.defaults.group_id
        meta["JAVA_SOURCE_VERSION"] = self.defaults.java_version
        meta["SPRING_BOOT_VERSION"] = NOT_AVAILABLE
        return meta

    def parse(self, manifest_path: Path, cli_args: Sequence[str] = ()) -> MetadataMap:
        """Read project metadata, overriding seeded values from the manifest.

        A missing manifest leaves the seeded values final. A malformed one
        is logged as a warning and also leaves them intact.

        Args:
            manifest_path: Path to pom.xml
            cli_args: Positional generator arguments

        Returns:
            Metadata for the project, group, Java source and Spring Boot keys
        """
        meta = self.seed(cli_args)

        if not manifest_path.exists():
            logger.debug("No manifest at %s, using command-line values", manifest_path)
            return meta

        try:
            root = ET.parse(manifest_path).getroot()
        except (ET.ParseError, OSError) as e:
            logger.warning("Could not parse %s: %s", manifest_path.name, e)
            return meta

        parents = {child: parent for parent in root.iter() for child in parent}

        for key, tag in _PROJECT_TAGS.items():
            meta[key] = self._find_text(root, parents, tag, meta[key])
        meta["PROJECT_GROUP_ID"] = self._find_text(
            root, parents, "groupId", self.defaults.group_id
        )
        meta["JAVA_SOURCE_VERSION"] = self._find_text(
            root, parents, "java.version", self.defaults.java_version
        )
        meta["SPRING_BOOT_VERSION"] = self._parent_version(root)

        logger.debug(
            "Manifest %s: %s %s",
            manifest_path.name,
            meta["PROJECT_ARTIFACT_ID"],
            meta["PROJECT_VERSION"],
        )
        return meta

    @staticmethod
    def _find_text(
        root: ET.Element,
        parents: dict[ET.Element, ET.Element],
        tag: str,
        fallback: str,
    ) -> str:
        """Return the first non-empty text of tag outside a <parent> element."""
        for element in root.iter():
            if _local_name(element.tag) != tag:
                continue
            parent = parents.get(element)
            if parent is not None and _local_name(parent.tag) == "parent":
                continue
            value = _text_content(element)
            if value:
                return value
        return fallback

    @staticmethod
    def _parent_version(root: ET.Element) -> str:
        """Return the version declared under the first <parent> element."""
        for element in root.iter():
            if _local_name(element.tag) != "parent":
                continue
            for child in element.iter():
                if child is not element and _local_name(child.tag) == "version":
                    return _text_content(child)
            return NOT_AVAILABLE
        return NOT_AVAILABLE


def parse_manifest(
    manifest_path: Path,
    cli_args: Sequence[str] = (),
    defaults: DefaultsConfig | None = None,
) -> MetadataMap:
    """Parse a manifest with a default ManifestParser."""
    return ManifestParser(defaults).parse(manifest_path, cli_args)
