"""
Test data for the UI suite: login scenarios, registration payloads,
form values and upload files.
"""

from pathlib import Path

# Files used by the upload tests
FILES_DIR = Path(__file__).parent / "files"


def upload_file_path(name: str) -> Path:
    """Absolute path of an upload fixture file."""
    return FILES_DIR / name
