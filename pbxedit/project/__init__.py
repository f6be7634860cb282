import functools
import logging
from pathlib import Path
from typing import List, Optional, Union

from pbxedit.config import Config
from pbxedit.project import attributes, editor
from pbxedit.project.model import CodeSignStyle
from pbxedit.project.persistence import ProjectFile
from pbxedit.project.search_paths import SearchPathSetting, add_search_path, remove_search_path
from pbxedit.project.status import ProjectLoadError, Status
from pbxedit.project.store import ObjectStore
from pbxedit.project.validator import validate_build_files, validate_references

logger = logging.getLogger(__name__)


# Editor operations report NOT_LOADED instead of failing when no project is open
def requires_store(method):
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        if self.store is None:
            logger.error("no project loaded, call load() first")
            return Status.NOT_LOADED
        return method(self, *args, **kwargs)

    return wrapper


class ProjectEditor:
    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()
        self.project: Optional[ProjectFile] = None

    @property
    def store(self) -> Optional[ObjectStore]:
        return self.project.store if self.project is not None else None

    def load(self, path: Union[str, Path]) -> ObjectStore:
        """Open `path`, reusing the loaded store when the file is unchanged.

        Raises InvalidInputError or IncompleteDataError.
        """
        if self.project is None or Path(self.project.path) != Path(path):
            self.project = ProjectFile(path, self.config)
        try:
            return self.project.reload_if_changed()
        except ProjectLoadError as e:
            logger.error("%s", e)
            raise

    def close(self) -> None:
        if self.project is not None:
            self.project.close()
        self.project = None

    @requires_store
    def link_framework(self, path: str) -> Status:
        return editor.link_framework(self.store, path)

    @requires_store
    def unlink_framework(self, path: str) -> Status:
        return editor.unlink_framework(self.store, path)

    @requires_store
    def link_static_library(self, path: str) -> Status:
        return editor.link_static_library(self.store, path)

    @requires_store
    def unlink_static_library(self, path: str) -> Status:
        return editor.unlink_static_library(self.store, path)

    @requires_store
    def add_file(self, path: str) -> Status:
        return editor.add_file(self.store, path)

    @requires_store
    def add_folder(self, path: str) -> Status:
        return editor.add_folder(self.store, path)

    @requires_store
    def add_group(self, name: str) -> Status:
        return editor.add_group(self.store, name)

    @requires_store
    def set_framework_search_path(self, path: str) -> Status:
        return add_search_path(self.store, SearchPathSetting.FRAMEWORK, path)

    @requires_store
    def remove_framework_search_path(self, path: str) -> Status:
        return remove_search_path(self.store, SearchPathSetting.FRAMEWORK, path)

    @requires_store
    def set_library_search_path(self, path: str) -> Status:
        return add_search_path(self.store, SearchPathSetting.LIBRARY, path)

    @requires_store
    def remove_library_search_path(self, path: str) -> Status:
        return remove_search_path(self.store, SearchPathSetting.LIBRARY, path)

    @requires_store
    def set_product_name(self, name: str) -> Status:
        return attributes.set_product_name(self.store, name)

    @requires_store
    def set_bundle_id(self, bundle_id: str) -> Status:
        return attributes.set_bundle_id(self.store, bundle_id)

    @requires_store
    def set_code_sign_style(self, style: Union[CodeSignStyle, str]) -> Status:
        return attributes.set_code_sign_style(self.store, style)

    def get_bundle_id(self) -> str:
        if self.store is None:
            logger.error("no project loaded, call load() first")
            return ""
        return attributes.get_bundle_id(self.store)

    def get_product_name(self) -> str:
        if self.store is None:
            logger.error("no project loaded, call load() first")
            return ""
        return attributes.get_product_name(self.store)

    def validate(self) -> List[str]:
        if self.store is None:
            return ["no project loaded"]
        return validate_references(self.store) + validate_build_files(self.store)

    def save(self) -> Status:
        if self.project is None:
            logger.error("no project loaded, call load() first")
            return Status.NOT_LOADED
        return self.project.save()
