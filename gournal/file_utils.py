"""
File utility functions for gournal.
Common file operations shared by the storage backends.
"""
import json
import os
from typing import Any


def load_json_file(filepath: str) -> Any:
    """
    Load and decode a JSON file.

    Args:
        filepath: Path to the JSON file

    Returns:
        Decoded JSON data

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the content is not valid JSON
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        return json.load(f)


def save_json_file(filepath: str, data: Any, ensure_dir: bool = True) -> None:
    """
    Save data to a JSON file, replacing any existing content.

    Args:
        filepath: Path to save the JSON file
        data: Data to save
        ensure_dir: Whether to create parent directory if it doesn't exist
    """
    if ensure_dir:
        os.makedirs(os.path.dirname(filepath) or ".", exist_ok=True)
    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2)


def get_mtime(filepath: str) -> float:
    """
    Get the last modification time of a file.

    Args:
        filepath: Path to the file

    Returns:
        Modification time as a POSIX timestamp
    """
    return os.stat(filepath).st_mtime
