import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import make_manifest_error

MANIFEST_FILENAME = "cto.toml"


@dataclass
class ProjectManifest:
    """
    Project manifest loaded from cto.toml.

    Examples in cto.toml:

        [project]
        name = "example"
        version = "0.1.0"

        [models]
        paths = ["models"]
    """

    name: str
    version: str
    project_root: str
    model_paths: list[str] = field(default_factory=lambda: ["models"])


def _get_str(table: dict, key: str, default: str, path: Path) -> str:
    value = table.get(key, default)
    if not isinstance(value, str):
        raise make_manifest_error(f"'{key}' must be a string, got {type(value).__name__}", path)
    return value


def load_manifest(path: Path) -> ProjectManifest:
    """
    Load a cto.toml project manifest.

    Args:
        path: Path to the manifest file

    Returns:
        ProjectManifest with defaults filled in for missing keys

    Raises:
        ManifestError: If the file is not valid TOML or a key has the wrong type
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise make_manifest_error(f"Invalid TOML: {e}", path) from e

    project = data.get("project", {})
    models = data.get("models", {})
    if not isinstance(project, dict) or not isinstance(models, dict):
        raise make_manifest_error("[project] and [models] must be tables", path)

    paths = models.get("paths", ["models"])
    if not isinstance(paths, list) or not all(isinstance(p, str) for p in paths):
        raise make_manifest_error("'models.paths' must be a list of strings", path)

    return ProjectManifest(
        name=_get_str(project, "name", path.resolve().parent.name, path),
        version=_get_str(project, "version", "0.0.0", path),
        project_root=str(path.parent),
        model_paths=paths,
    )
