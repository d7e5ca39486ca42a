"""
Pure storage layer for file operations.

This module provides low-level file operations without any business logic.
"""

import json
import os
from typing import Any, Dict, Optional

from .errors import StoreError


class Storage:
    """Pure file operations without business logic."""

    def ensure_directory(self, path: str) -> None:
        """Create directory if it doesn't exist."""
        os.makedirs(path, exist_ok=True)

    def file_exists(self, path: str) -> bool:
        """Check if file exists."""
        return os.path.exists(path)

    def read_json(self, path: str) -> Optional[Dict[str, Any]]:
        """Read JSON object from file, None if the file doesn't exist.

        Raises:
            StoreError: If the file can't be read or isn't a JSON object.
        """
        if not os.path.exists(path):
            return None

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise StoreError(f"Invalid JSON in {path}: {e}", path) from e
        except OSError as e:
            raise StoreError(f"Could not read {path}: {e}", path) from e

        if not isinstance(data, dict):
            raise StoreError(f"Expected a JSON object in {path}", path)
        return data

    def write_json(self, path: str, data: Dict[str, Any]) -> None:
        """Write data to JSON file, replacing any previous content.

        Raises:
            StoreError: If the file can't be written.
        """
        try:
            # Ensure directory exists
            directory = os.path.dirname(path)
            if directory:
                self.ensure_directory(directory)

            with open(path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except (OSError, TypeError) as e:
            raise StoreError(f"Could not write {path}: {e}", path) from e
