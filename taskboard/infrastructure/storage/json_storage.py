"""JSON file storage with Result-based error handling.

Thin wrapper around file I/O for JSON documents. Returns Result types
instead of raising, and holds no board logic.
"""

import json
import os
from pathlib import Path
from typing import Any

from taskboard.domain.shared import Err, Ok, Result


class JsonStorage:
    """Low-level JSON file I/O.

    Example:
        storage = JsonStorage()
        result = storage.load_json(Path("board.json"))
        if isinstance(result, Ok):
            data = result.value
        else:
            print(f"Error: {result.error}")
    """

    def load_json(self, path: Path) -> Result[Any, str]:
        """Load a JSON document from a file.

        Args:
            path: Path to the JSON file to read.

        Returns:
            Ok(parsed document) if successful, Err(str) otherwise.
        """
        try:
            if not path.exists():
                return Err(f"File not found: {path}")

            content = path.read_text(encoding="utf-8")
            return Ok(json.loads(content))

        except json.JSONDecodeError as e:
            return Err(f"Invalid JSON in {path}: {e}")
        except UnicodeDecodeError as e:
            return Err(f"Invalid encoding in {path}: {e}")
        except PermissionError:
            return Err(f"Permission denied reading {path}")
        except OSError as e:
            return Err(f"Error reading {path}: {e}")

    def save_json(
        self,
        path: Path,
        data: Any,
        indent: int = 2,
    ) -> Result[None, str]:
        """Save a JSON document to a file.

        The document is written to a sibling temp file first and then
        renamed over ``path``, so a crash mid-write leaves the old file.

        Args:
            path: Path to the JSON file to write.
            data: JSON-serializable document.
            indent: JSON indentation level (default 2).

        Returns:
            Ok(None) if successful, Err(str) otherwise.
        """
        tmp_path = path.with_name(f"{path.name}.tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)

            content = json.dumps(data, indent=indent)
            tmp_path.write_text(content, encoding="utf-8")
            os.replace(tmp_path, path)
            return Ok(None)

        except TypeError as e:
            return Err(f"Data not JSON serializable: {e}")
        except PermissionError:
            return Err(f"Permission denied writing {path}")
        except OSError as e:
            return Err(f"Error writing {path}: {e}")
