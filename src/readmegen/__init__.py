"""readmegen - Build-time README generator for Maven/Spring projects.

readmegen collects project metadata from the Maven manifest, the host
environment, git history and the project's own Java sources, then renders
README.md by substituting {{PLACEHOLDER}} tokens in a template.

Core principles:
- Best-Effort Collection: Missing tools and files degrade to sentinel values
- Reproducibility: Same tree produces the same endpoints table
- CI/CD Compatibility: No interactive prompts, meaningful exit codes
"""

__version__ = "1.0.0"
__author__ = "readmegen Contributors"
