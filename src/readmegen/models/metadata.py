"""Metadata map: placeholder keys and the values substituted for them.

The key set is closed. PLACEHOLDERS lists every key in reporting order
together with the description shown by `readmegen placeholders`.
"""

UNKNOWN = "Unknown"
NOT_AVAILABLE = "N/A"

# Insertion order is the console reporting order
PLACEHOLDERS: dict[str, str] = {
    "PROJECT_NAME": "Project display name",
    "PROJECT_ARTIFACT_ID": "Maven artifact ID",
    "PROJECT_VERSION": "Current version",
    "PROJECT_DESCRIPTION": "POM description",
    "PROJECT_GROUP_ID": "Maven group ID",
    "JAVA_SOURCE_VERSION": "Java source level (java.version property)",
    "SPRING_BOOT_VERSION": "Spring Boot parent version",
    "BUILD_TIME": "Build timestamp",
    "JAVA_VERSION": "Java runtime version",
    "JAVA_HOME": "Java runtime install path",
    "OS_NAME": "Operating system",
    "OS_ARCH": "OS architecture",
    "USER_NAME": "System username",
    "GIT_BRANCH": "Current git branch",
    "GIT_COMMIT": "Short commit hash",
    "GIT_MESSAGE": "Last commit message",
    "ENDPOINTS_TABLE": "Auto-scanned REST endpoints",
}

MetadataMap = dict[str, str]


def sentinel_for(key: str) -> str:
    """Return the stand-in value used when a key could not be collected."""
    return UNKNOWN if key == "PROJECT_NAME" else NOT_AVAILABLE


def ensure_complete(meta: MetadataMap) -> MetadataMap:
    """Give every placeholder key a value.

    Missing keys receive their sentinel. The result is ordered like
    PLACEHOLDERS, followed by any extra keys in their original order.

    Args:
        meta: Collected metadata (not modified)

    Returns:
        New mapping covering every key in PLACEHOLDERS
    """
    complete: MetadataMap = {}
    for key in PLACEHOLDERS:
        value = meta.get(key)
        complete[key] = value if value is not None else sentinel_for(key)
    for key, value in meta.items():
        if key not in complete:
            complete[key] = value
    return complete


def missing_keys(meta: MetadataMap) -> list[str]:
    """Return placeholder keys that have no value in meta."""
    return [key for key in PLACEHOLDERS if meta.get(key) is None]
