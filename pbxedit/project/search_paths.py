# Search-path build settings.
#
# FRAMEWORK_SEARCH_PATHS and LIBRARY_SEARCH_PATHS may be stored as a single
# string, as a list of strings, or not at all. The value is classified into one
# of the shapes below and every add/remove transition is spelled out per shape.

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, List, Union

from pbxedit.project.model import XCBuildConfiguration
from pbxedit.project.status import Status
from pbxedit.project.store import ObjectStore

logger = logging.getLogger(__name__)

INHERITED = "$(inherited)"


class SearchPathSetting(Enum):
    FRAMEWORK = "FRAMEWORK_SEARCH_PATHS"
    LIBRARY = "LIBRARY_SEARCH_PATHS"


@dataclass(frozen=True)
class AbsentSetting:
    pass


@dataclass(frozen=True)
class ScalarSetting:
    value: str


@dataclass(frozen=True)
class ListSetting:
    values: List[Any]


SettingShape = Union[AbsentSetting, ScalarSetting, ListSetting]


def classify(value: Any) -> SettingShape:
    if isinstance(value, str):
        return ScalarSetting(value)
    elif isinstance(value, list):
        return ListSetting(list(value))
    # missing, or a shape a search path never has (map, number, ...)
    return AbsentSetting()


# Configurations without a product name or bundle id are project-level or
# inherited base configurations and are left alone...
def target_configurations(store: ObjectStore) -> Iterator[XCBuildConfiguration]:
    for config in store.of_type(XCBuildConfiguration):
        if not config.build_settings:
            continue
        if not config.setting("PRODUCT_NAME") and not config.setting(
            "PRODUCT_BUNDLE_IDENTIFIER"
        ):
            continue
        yield config


def add_search_path(store: ObjectStore, setting: SearchPathSetting, path: str) -> Status:
    """Merge `path` into `setting` of every target configuration.

    The first configuration that already holds `path` ends the whole
    operation, including for configurations not yet visited.
    """
    if not path:
        logger.error("empty search path")
        return Status.INVALID_INPUT
    key = setting.value
    visited = 0
    for config in target_configurations(store):
        visited += 1
        shape = classify(config.build_settings.get(key))
        if isinstance(shape, ScalarSetting):
            if shape.value == path:
                logger.info("%s already contains %s", key, path)
                return Status.ALREADY_EXISTS
            config.set_setting(key, [shape.value, path])
        elif isinstance(shape, ListSetting):
            if path in shape.values:
                logger.info("%s already contains %s", key, path)
                return Status.ALREADY_EXISTS
            config.set_setting(key, shape.values + [path])
        elif isinstance(shape, AbsentSetting):
            config.set_setting(key, [INHERITED, path])
        else:
            raise TypeError(f"unhandled setting shape {shape!r}")
    if not visited:
        logger.error("no target build configuration carries %s", key)
        return Status.NOT_FOUND
    return Status.OK


def remove_search_path(store: ObjectStore, setting: SearchPathSetting, path: str) -> Status:
    if not path:
        logger.error("empty search path")
        return Status.INVALID_INPUT
    key = setting.value
    visited = 0
    for config in target_configurations(store):
        visited += 1
        shape = classify(config.build_settings.get(key))
        if isinstance(shape, ScalarSetting):
            if shape.value == path:
                config.set_setting(key, [INHERITED])
        elif isinstance(shape, ListSetting):
            config.set_setting(key, [value for value in shape.values if value != path])
        elif isinstance(shape, AbsentSetting):
            config.set_setting(key, [INHERITED])
        else:
            raise TypeError(f"unhandled setting shape {shape!r}")
    if not visited:
        logger.error("no target build configuration carries %s", key)
        return Status.NOT_FOUND
    return Status.OK
