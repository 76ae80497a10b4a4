"""
Discovery of model source files for a project.
"""

from pathlib import Path

from .manifest import ProjectManifest


def discover_cto_files(root: Path, manifest: ProjectManifest) -> list[Path]:
    """
    Find every ``*.cto`` file under the manifest's model paths.

    Each entry of ``manifest.model_paths`` is resolved against ``root`` and
    searched recursively; entries that do not exist are skipped. Files
    reachable through more than one entry (overlapping or repeated paths)
    appear once.

    Returns:
        Absolute paths, deduplicated and sorted by full path
    """
    found: set[Path] = set()
    for rel in manifest.model_paths:
        base = (root / rel).resolve()
        if base.exists():
            found.update(base.rglob("*.cto"))
    return sorted(found)
