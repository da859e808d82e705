import json
import os
import re
from pathlib import Path
from typing import Any, List

from ..exceptions import OutputWriteError
from ..models.file_spec import FileSpec
from ..utils.logger import Logger

UNSAFE_FILE_NAME_CHARS = re.compile(r"[^A-Za-z0-9\s-]")


class FileService:
    """Reads input documents and writes generated files."""

    def __init__(self):
        self.logger = Logger.get_logger(__name__)

    @staticmethod
    def read_json(path: str) -> Any:
        """Load a JSON document. Errors propagate to the caller."""
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    def list_json_files(self, directory: str) -> List[str]:
        """Return the ``.json`` files directly inside ``directory``, sorted by name."""
        folder = Path(directory)
        if not folder.is_dir():
            self.logger.warning(f"⚠️ Folder not found: {directory}")
            return []
        return sorted(str(p) for p in folder.iterdir() if p.is_file() and p.suffix.lower() == ".json")

    def create_files(self, destination_folder: str, files: List[FileSpec]) -> List[str]:
        """
        Write files below ``destination_folder``, creating missing folders.

        Args:
            destination_folder: Root folder for the relative file paths
            files: Files to write; existing files are overwritten

        Returns:
            List[str]: Paths of the written files

        Raises:
            OutputWriteError: If a folder or file cannot be written
        """
        created: List[str] = []
        for file_spec in files:
            relative_path = file_spec.path
            if relative_path.startswith("./"):
                relative_path = relative_path[2:]
            relative_path = relative_path.lstrip("/\\")

            file_path = os.path.join(destination_folder, relative_path)
            try:
                os.makedirs(os.path.dirname(file_path) or ".", exist_ok=True)
                with open(file_path, "w", encoding="utf-8") as f:
                    f.write(file_spec.fileContent)
            except OSError as e:
                raise OutputWriteError(file_path, e) from e

            created.append(file_path)
            self.logger.debug(f"Created file: {file_path}")
        return created

    def write_request_file(self, directory: str, name: str, content: str, extension: str = ".http") -> str:
        """Write one rendered request to ``directory`` under its sanitized name."""
        file_name = self.request_file_name(name, extension)
        return self.create_files(directory, [FileSpec(path=file_name, fileContent=content)])[0]

    @staticmethod
    def request_file_name(name: str, extension: str = ".http") -> str:
        """Replace everything but ASCII letters, digits, whitespace and hyphens with underscores."""
        return UNSAFE_FILE_NAME_CHARS.sub("_", name) + extension

    @staticmethod
    def ensure_folder(path: str) -> None:
        try:
            os.makedirs(path, exist_ok=True)
        except OSError as e:
            raise OutputWriteError(path, e) from e
