"""
File access used by the divider. Every method raises OSError on failure.
Tests subclass FileAccess to inject failures.
"""

import os
from typing import BinaryIO, List


class FileAccess:
    """Local filesystem access."""

    def exists(self, path: str) -> bool:
        return os.path.isfile(path)

    def size(self, path: str) -> int:
        return os.path.getsize(path)

    def list_dir(self, directory: str) -> List[str]:
        return [name for name in os.listdir(directory or '.')
                if os.path.isfile(os.path.join(directory, name))]

    def open_read(self, path: str) -> BinaryIO:
        return open(path, 'rb')

    def create(self, path: str) -> None:
        """Create an empty file, failing if it already exists."""
        with open(path, 'xb'):
            pass

    def open_append(self, path: str) -> BinaryIO:
        return open(path, 'ab')

    def write_bytes(self, path: str, data: bytes) -> None:
        with open(path, 'wb') as out:
            out.write(data)

    def delete(self, path: str) -> None:
        os.remove(path)
