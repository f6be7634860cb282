# Xcode project object model.
#
# Every object in a .pbxproj is a raw field map carrying an `isa` discriminator.
# The classes below wrap those maps in a closed set of tagged variants. The raw
# `fields` dict stays the source of truth so that fields and object kinds the
# editor does not understand are written back untouched.

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Iterator, List, Optional, Type

import uuid


# Type definition for Xcode object identifiers
class XcodeID(str):
    pass


ID_LENGTH = 24


def generate_id() -> XcodeID:
    return XcodeID(uuid.uuid4().hex.upper()[-ID_LENGTH:])


class SourceTree(Enum):
    GROUP = "<group>"
    SOURCE_ROOT = "SOURCE_ROOT"
    BUILT_PRODUCTS_DIR = "BUILT_PRODUCTS_DIR"
    SDKROOT = "SDKROOT"
    ABSOLUTE = "<absolute>"


# File types used in PBXFileReference.lastKnownFileType
class FileType(Enum):
    ARCHIVE = "archive.ar"
    FRAMEWORK = "wrapper.framework"
    XIB = "file.xib"
    PLIST = "text.plist.xml"
    PLUGIN = "wrapper.plug-in"
    JAVASCRIPT = "sourcecode.javascript"
    HTML = "sourcecode.html"
    JSON = "sourcecode.json"
    XML = "sourcecode.xml"
    PNG = "image.png"
    TEXT = "text"
    XCCONFIG = "text.xcconfig"
    TBD = "sourcecode.text-based-dylib-definition"
    SHELL = "text.script.sh"
    C_HEADER = "sourcecode.c.h"
    DATA_MODEL = "wrapper.xcdatamodel"
    OBJC = "sourcecode.c.objc"
    SWIFT = "sourcecode.swift"
    STORYBOARD = "file.storyboard"
    DYLIB = "compiled.mach-o.dylib"
    JPEG = "image.jpg"
    MP4 = "video.mp4"
    APP = "wrapper.application"
    ASSET_CATALOG = "folder.assetcatalog"
    FOLDER = "folder"
    UNKNOWN = "unknown"

    @staticmethod
    def from_extension(ext: str) -> "FileType":
        if ext.startswith("."):
            ext = ext[1:]

        ext_to_type = {
            "a": FileType.ARCHIVE,
            "framework": FileType.FRAMEWORK,
            "xib": FileType.XIB,
            "plist": FileType.PLIST,
            "bundle": FileType.PLUGIN,
            "js": FileType.JAVASCRIPT,
            "html": FileType.HTML,
            "json": FileType.JSON,
            "xml": FileType.XML,
            "png": FileType.PNG,
            "txt": FileType.TEXT,
            "xcconfig": FileType.XCCONFIG,
            "markdown": FileType.TEXT,
            "tbd": FileType.TBD,
            "sh": FileType.SHELL,
            "pch": FileType.C_HEADER,
            "xcdatamodel": FileType.DATA_MODEL,
            "m": FileType.OBJC,
            "h": FileType.C_HEADER,
            "swift": FileType.SWIFT,
            "storyboard": FileType.STORYBOARD,
            "dylib": FileType.DYLIB,
            "jpg": FileType.JPEG,
            "jpeg": FileType.JPEG,
            "mp4": FileType.MP4,
            "app": FileType.APP,
            "xcassets": FileType.ASSET_CATALOG,
        }

        # lookup is case-sensitive
        return ext_to_type.get(ext, FileType.UNKNOWN)


# Product types used in PBXNativeTarget
class ProductType(Enum):
    APPLICATION = "com.apple.product-type.application"
    FRAMEWORK = "com.apple.product-type.framework"
    STATIC_LIBRARY = "com.apple.product-type.library.static"
    DYNAMIC_LIBRARY = "com.apple.product-type.library.dynamic"
    BUNDLE = "com.apple.product-type.bundle"
    TOOL = "com.apple.product-type.tool"
    UNIT_TEST_BUNDLE = "com.apple.product-type.unit-test.bundle"
    APP_EXTENSION = "com.apple.product-type.app-extension"


class BuildPhaseKind(Enum):
    SOURCES = "PBXSourcesBuildPhase"
    FRAMEWORKS = "PBXFrameworksBuildPhase"
    RESOURCES = "PBXResourcesBuildPhase"
    HEADERS = "PBXHeadersBuildPhase"
    COPY_FILES = "PBXCopyFilesBuildPhase"
    SHELL_SCRIPT = "PBXShellScriptBuildPhase"


class CodeSignStyle(Enum):
    AUTOMATIC = "Automatic"
    MANUAL = "Manual"


def string_field(fields: Dict[str, Any], key: str) -> str:
    value = fields.get(key)
    return value if isinstance(value, str) else ""


def id_list_field(fields: Dict[str, Any], key: str) -> List[str]:
    value = fields.get(key)
    return value if isinstance(value, list) else []


# The list is only created in the record when something is added to it
def append_id(fields: Dict[str, Any], key: str, object_id: str) -> None:
    value = fields.get(key)
    if not isinstance(value, list):
        value = []
        fields[key] = value
    value.append(object_id)


# Base class for all Xcode objects
@dataclass(eq=False)
class PBXObject:
    id: XcodeID
    fields: Dict[str, Any]

    ISA: ClassVar[Optional[str]] = None

    @property
    def isa(self) -> str:
        return string_field(self.fields, "isa")

    def has_content(self, fields: Dict[str, Any]) -> bool:
        """Structural equality against a raw record, ignoring identity."""
        return self.fields == fields

    def references(self) -> Iterator[str]:
        """Identifiers of other objects this one points at."""
        return iter(())


@dataclass(eq=False)
class PBXFileReference(PBXObject):
    ISA = "PBXFileReference"

    @property
    def name(self) -> str:
        return string_field(self.fields, "name")

    @property
    def path(self) -> str:
        return string_field(self.fields, "path")

    @property
    def file_type(self) -> str:
        return string_field(self.fields, "lastKnownFileType") or string_field(
            self.fields, "explicitFileType"
        )


@dataclass(eq=False)
class PBXBuildFile(PBXObject):
    ISA = "PBXBuildFile"

    @property
    def file_ref(self) -> str:
        return string_field(self.fields, "fileRef")

    def references(self) -> Iterator[str]:
        if self.file_ref:
            yield self.file_ref


@dataclass(eq=False)
class PBXGroup(PBXObject):
    ISA = "PBXGroup"

    @property
    def name(self) -> str:
        return string_field(self.fields, "name") or string_field(self.fields, "path")

    @property
    def children(self) -> List[str]:
        return id_list_field(self.fields, "children")

    def add_child(self, object_id: str) -> None:
        append_id(self.fields, "children", object_id)

    def references(self) -> Iterator[str]:
        yield from self.fields.get("children") or []


@dataclass(eq=False)
class PBXVariantGroup(PBXGroup):
    ISA = "PBXVariantGroup"


@dataclass(eq=False)
class PBXBuildPhase(PBXObject):
    @property
    def kind(self) -> BuildPhaseKind:
        return BuildPhaseKind(self.isa)

    @property
    def files(self) -> List[str]:
        return id_list_field(self.fields, "files")

    def add_file(self, object_id: str) -> None:
        append_id(self.fields, "files", object_id)

    def references(self) -> Iterator[str]:
        yield from self.fields.get("files") or []


@dataclass(eq=False)
class PBXNativeTarget(PBXObject):
    ISA = "PBXNativeTarget"

    @property
    def name(self) -> str:
        return string_field(self.fields, "name")

    @property
    def product_type(self) -> str:
        return string_field(self.fields, "productType")

    def references(self) -> Iterator[str]:
        yield from self.fields.get("buildPhases") or []
        if string_field(self.fields, "buildConfigurationList"):
            yield self.fields["buildConfigurationList"]


@dataclass(eq=False)
class PBXProject(PBXObject):
    ISA = "PBXProject"

    @property
    def main_group(self) -> str:
        return string_field(self.fields, "mainGroup")

    @property
    def targets(self) -> List[str]:
        value = self.fields.get("targets")
        return value if isinstance(value, list) else []

    @property
    def target_attributes(self) -> Dict[str, Any]:
        attributes = self.fields.get("attributes")
        if not isinstance(attributes, dict):
            return {}
        value = attributes.get("TargetAttributes")
        return value if isinstance(value, dict) else {}

    def references(self) -> Iterator[str]:
        if self.main_group:
            yield self.main_group
        yield from self.targets
        if string_field(self.fields, "buildConfigurationList"):
            yield self.fields["buildConfigurationList"]


@dataclass(eq=False)
class XCConfigurationList(PBXObject):
    ISA = "XCConfigurationList"

    def references(self) -> Iterator[str]:
        yield from self.fields.get("buildConfigurations") or []


@dataclass(eq=False)
class XCBuildConfiguration(PBXObject):
    ISA = "XCBuildConfiguration"

    @property
    def name(self) -> str:
        return string_field(self.fields, "name")

    @property
    def build_settings(self) -> Dict[str, Any]:
        value = self.fields.get("buildSettings")
        return value if isinstance(value, dict) else {}

    def setting(self, key: str) -> str:
        return string_field(self.build_settings, key)

    def set_setting(self, key: str, value: Any) -> None:
        if not isinstance(self.fields.get("buildSettings"), dict):
            self.fields["buildSettings"] = {}
        self.fields["buildSettings"][key] = value


# Everything the editor has no dedicated variant for
@dataclass(eq=False)
class PBXOtherObject(PBXObject):
    pass


ISA_TYPES: Dict[str, Type[PBXObject]] = {
    cls.ISA: cls
    for cls in (
        PBXFileReference,
        PBXBuildFile,
        PBXGroup,
        PBXVariantGroup,
        PBXNativeTarget,
        PBXProject,
        XCConfigurationList,
        XCBuildConfiguration,
    )
}
ISA_TYPES.update({kind.value: PBXBuildPhase for kind in BuildPhaseKind})


def make_object(object_id: str, fields: Dict[str, Any]) -> PBXObject:
    if not isinstance(fields, dict):
        raise TypeError(f"object {object_id} is not a map: {type(fields).__name__}")
    object_type = ISA_TYPES.get(string_field(fields, "isa"), PBXOtherObject)
    return object_type(id=XcodeID(object_id), fields=fields)
