"""Metadata collectors.

Each collector returns part of the metadata map and absorbs its own
failures into sentinel values:
- manifest: pom.xml project fields
- environment: build time, Java runtime, OS and user
- git: branch, commit and last message
- routes: endpoints table from Spring mapping annotations
"""

from readmegen.collectors.environment import EnvironmentProbe
from readmegen.collectors.git import GitProbe
from readmegen.collectors.manifest import ManifestParser, parse_manifest
from readmegen.collectors.routes import RouteScanner, build_endpoints_table, scan_routes

__all__ = [
    "EnvironmentProbe",
    "GitProbe",
    "ManifestParser",
    "parse_manifest",
    "RouteScanner",
    "build_endpoints_table",
    "scan_routes",
]
