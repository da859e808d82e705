import json
import os
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from ..configuration.config import Config
from ..exceptions import DocumentParseError
from ..models import CollectionDocument, EnvironmentDocument
from ..processors.postman.models import Leaf
from ..processors.postman.request_renderer import RequestRenderer
from ..processors.postman.tree_flattener import TreeFlattener
from ..services.file_service import FileService
from ..services.settings_service import SettingsService
from ..utils.logger import Logger


class PostmanProcessor:
    """Converts exported Postman collections and environments into REST Client files."""

    def __init__(
        self,
        file_service: FileService,
        request_renderer: RequestRenderer,
        settings_service: SettingsService,
        config: Config,
    ):
        self.file_service = file_service
        self.request_renderer = request_renderer
        self.settings_service = settings_service
        self.config = config
        self.logger = Logger.get_logger(__name__)

    def load_collection(self, path: str) -> CollectionDocument:
        """
        Parse a collection document.

        Raises:
            DocumentParseError: If the file is not valid JSON or not a collection
        """
        try:
            return CollectionDocument.model_validate(self.file_service.read_json(path))
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            raise DocumentParseError(path, e) from e

    def load_environment(self, path: str) -> EnvironmentDocument:
        """
        Parse an environment document.

        Raises:
            DocumentParseError: If the file is not valid JSON or not an environment
        """
        try:
            return EnvironmentDocument.model_validate(self.file_service.read_json(path))
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            raise DocumentParseError(path, e) from e

    def get_request_folder(self, collection: CollectionDocument, leaf: Leaf) -> str:
        """Folder that receives the file of ``leaf``: requests/<collection>/<folders...>."""
        segments = [self._folder_segment(name) for name in (collection.name, *leaf.folders)]
        return os.path.join(str(self.config.requests_path), *segments)

    def generate_request_files(self, collection: CollectionDocument) -> List[str]:
        """
        Render and write one file per request of ``collection``.

        Returns:
            List[str]: Paths of the written files, in traversal order
        """
        written: List[str] = []
        for leaf in TreeFlattener.iter_leaves(collection):
            content = self.request_renderer.render(leaf.name, leaf.item.request)
            folder = self.get_request_folder(collection, leaf)
            written.append(
                self.file_service.write_request_file(folder, leaf.name, content, self.config.file_extension)
            )
        self.logger.info(f"Generated {len(written)} request file(s) for collection '{collection.name}'")
        return written

    def generate_all_requests(self) -> List[str]:
        """Convert every collection document; unparsable documents are logged and skipped."""
        self.file_service.ensure_folder(str(self.config.requests_path))
        written: List[str] = []
        for path in self.file_service.list_json_files(str(self.config.collections_path)):
            try:
                collection = self.load_collection(path)
            except DocumentParseError as e:
                self.logger.error(f"❌ {e}")
                continue
            self.logger.info(f"Processing collection '{collection.name}' from {path}")
            written.extend(self.generate_request_files(collection))
        return written

    def collect_environments(self) -> Dict[str, Dict[str, Any]]:
        """Read every environment document into a name -> variables mapping."""
        environments: Dict[str, Dict[str, Any]] = {}
        for path in self.file_service.list_json_files(str(self.config.environments_path)):
            try:
                environment = self.load_environment(path)
            except DocumentParseError as e:
                self.logger.error(f"❌ Failed to parse environment: {e}")
                continue
            environments[environment.name] = environment.to_variables()
            self.logger.info(f"Loaded environment '{environment.name}' ({len(environment.values)} variable(s))")
        return environments

    def generate_environment_variables(self) -> Optional[Dict[str, Any]]:
        """Merge all environments into the settings file and return the saved settings."""
        environments = self.collect_environments()
        if not environments:
            self.logger.warning("⚠️ No environments found, settings file left unchanged")
            return None
        return self.settings_service.update_environment_variables(environments)

    @staticmethod
    def _folder_segment(name: str) -> str:
        segment = name.replace("/", "_").replace("\\", "_")
        # "", "." and ".." would escape or collapse the mirrored folder tree
        return "_" if segment.strip() in ("", ".", "..") else segment
