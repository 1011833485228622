from pathlib import Path


def get_project_root(start: Path | None = None) -> Path:
    """Get the application checkout the commands operate on.

    Walks up from the working directory to find the repository root,
    identified by the presence of a .git entry.

    Returns:
        Path to the project root directory
    """
    current = (start or Path.cwd()).resolve()

    # Walk up the directory tree looking for .git
    for parent in [current, *current.parents]:
        if (parent / ".git").exists():
            return parent

    # Fallback to the working directory itself
    return current
