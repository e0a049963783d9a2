"""Write the generated document to disk."""

from pathlib import Path


def write_document(path: str | Path, text: str) -> Path:
    """Write ``text`` as UTF-8 to ``path``, creating parent directories.

    Args:
        path: Destination file
        text: Rendered document

    Returns:
        Path to the written file

    Raises:
        OSError: If the directories or the file cannot be written
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with open(file_path, "w", encoding="utf-8") as f:
        f.write(text)

    return file_path
