"""Sample projects used by the tests.

- sample_repos/spring_project: Spring Boot service with a pom.xml and one controller
"""

from pathlib import Path

SPRING_PROJECT_PATH = Path(__file__).parent / "sample_repos" / "spring_project"
