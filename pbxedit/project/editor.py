# Graph editor.
#
# Links and unlinks files, frameworks and static libraries. Linking creates a
# PBXFileReference, a PBXBuildFile pointing at it, and wires the build file into
# every build phase of the matching kind. Unlinking removes the reference and
# every build file and phase entry that points at it.

import logging
import os
from typing import Any, Dict, Optional, Set

from pbxedit.project.model import (
    BuildPhaseKind,
    FileType,
    PBXBuildFile,
    PBXBuildPhase,
    PBXGroup,
    SourceTree,
)
from pbxedit.project.search_paths import SearchPathSetting, add_search_path
from pbxedit.project.status import Status
from pbxedit.project.store import ObjectStore

logger = logging.getLogger(__name__)


def last_path_component(path: str) -> str:
    parts = [part for part in path.split("/") if part]
    return parts[-1] if parts else path


def search_directory(path: str) -> str:
    return os.path.dirname(path.rstrip("/"))


def file_reference_fields(path: str, file_type: FileType) -> Dict[str, Any]:
    return {
        "isa": "PBXFileReference",
        "lastKnownFileType": file_type.value,
        "sourceTree": SourceTree.GROUP.value,
        "name": last_path_component(path),
        "path": path,
    }


def link_file(
    store: ObjectStore,
    path: str,
    file_type: FileType,
    phase_kind: BuildPhaseKind,
    search_path: Optional[SearchPathSetting] = None,
) -> Status:
    """Add `path` to the project and to every `phase_kind` build phase.

    When `search_path` is given, the directory containing `path` is merged into
    that setting as well.
    """
    if not path or not os.path.exists(path):
        logger.error("path %r does not exist", path)
        return Status.INVALID_INPUT

    fields = file_reference_fields(path, file_type)
    if store.find_equal(fields):
        logger.info("%s is already part of the project", path)
        return Status.ALREADY_EXISTS

    file_ref = store.add(fields)
    build_file = store.add({"isa": "PBXBuildFile", "fileRef": file_ref.id})
    logger.debug("created file reference %s and build file %s", file_ref.id, build_file.id)

    phases = store.build_phases(phase_kind)
    for phase in phases:
        phase.add_file(build_file.id)

    if search_path is not None:
        directory = search_directory(path)
        if directory:
            add_search_path(store, search_path, directory)

    if not phases:
        logger.warning(
            "no %s in project, %s is referenced but not built", phase_kind.value, path
        )
        return Status.NO_BUILD_PHASE
    return Status.OK


def unlink_file(store: ObjectStore, path: str, file_type: FileType) -> Status:
    """Remove every file reference for `path` and the build files using it.

    Search paths are left as they are since other libraries may share the
    directory.
    """
    if not path:
        logger.error("empty path")
        return Status.INVALID_INPUT

    matches = store.find_equal(file_reference_fields(path, file_type))
    if not matches:
        logger.error("%s is not part of the project", path)
        return Status.NOT_FOUND

    removed: Set[str] = set()
    for file_ref in matches:
        store.remove(file_ref.id)
        removed.add(file_ref.id)

    for build_file in store.of_type(PBXBuildFile):
        if build_file.file_ref in removed:
            store.remove(build_file.id)
            removed.add(build_file.id)

    for phase in store.of_type(PBXBuildPhase):
        if any(file_id in removed for file_id in phase.files):
            phase.files[:] = [file_id for file_id in phase.files if file_id not in removed]

    logger.debug("removed %d objects for %s", len(removed), path)
    return Status.OK


def link_framework(store: ObjectStore, path: str) -> Status:
    return link_file(
        store, path, FileType.FRAMEWORK, BuildPhaseKind.FRAMEWORKS, SearchPathSetting.FRAMEWORK
    )


def unlink_framework(store: ObjectStore, path: str) -> Status:
    return unlink_file(store, path, FileType.FRAMEWORK)


def link_static_library(store: ObjectStore, path: str) -> Status:
    return link_file(
        store, path, FileType.ARCHIVE, BuildPhaseKind.FRAMEWORKS, SearchPathSetting.LIBRARY
    )


def unlink_static_library(store: ObjectStore, path: str) -> Status:
    return unlink_file(store, path, FileType.ARCHIVE)


def add_file(store: ObjectStore, path: str) -> Status:
    _, ext = os.path.splitext(path)
    return link_file(store, path, FileType.from_extension(ext), BuildPhaseKind.RESOURCES)


def add_folder(store: ObjectStore, path: str) -> Status:
    return link_file(store, path, FileType.FOLDER, BuildPhaseKind.RESOURCES)


def add_group(store: ObjectStore, name: str) -> Status:
    """Create a group named `name` under the main group.

    The group path is rooted at the primary application target's name.
    """
    if not name:
        logger.error("empty group name")
        return Status.INVALID_INPUT
    main_group = store.main_group
    if not isinstance(main_group, PBXGroup):
        logger.error("main group %s is a %s", main_group.id, main_group.isa)
        return Status.INVALID_INPUT

    fields = {
        "children": [],
        "isa": "PBXGroup",
        "name": name,
        "sourceTree": SourceTree.GROUP.value,
        "path": f"{store.primary_product_name}/{name}",
    }
    if store.find_equal(fields):
        logger.info("group %s already exists", name)
        return Status.ALREADY_EXISTS

    group = store.add(fields)
    main_group.add_child(group.id)
    return Status.OK
