# Project file persistence.
#
# A ProjectFile resolves a .xcodeproj bundle or a bare project.pbxproj, parses it
# into an ObjectStore and writes the store back in the format it was read in.
# The parsed store is cached on the handle under a fingerprint of the resolved
# path and the file bytes, so reloading an unchanged file does not reparse it.

import hashlib
import logging
import plistlib
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union

import openstep_parser as osp

from pbxedit.config import Config
from pbxedit.project.formatter import format_xcode_project
from pbxedit.project.status import IncompleteDataError, InvalidInputError, Status
from pbxedit.project.store import ObjectStore

logger = logging.getLogger(__name__)

BUNDLE_SUFFIX = ".xcodeproj"

# Code points rewritten as decimal character references after every save
CJK_FIRST = 0x4E00
CJK_LAST = 0x9FFF


class DocumentFormat(Enum):
    OPENSTEP = "openstep"
    XML = "xml"


def resolve_project_path(path: Union[str, Path], config: Config) -> Path:
    """
    Resolve the document location for a bundle or document path.

    Args:
        path: A .xcodeproj bundle or a project.pbxproj file.
        config: Supplies the document name inside a bundle.

    Returns:
        The path of the document file.

    Raises:
        InvalidInputError: If the path is empty, missing, or not a file.
    """
    if not str(path):
        raise InvalidInputError("project path is empty")
    project_path = Path(path)
    if project_path.suffix == BUNDLE_SUFFIX:
        project_path = project_path / config.project_file
    if not project_path.exists():
        raise InvalidInputError(f"project file not found: {project_path}")
    if not project_path.is_file():
        raise InvalidInputError(f"project file is not a regular file: {project_path}")
    return project_path


def fingerprint(path: Path, data: bytes) -> str:
    hasher = hashlib.blake2b()
    hasher.update(str(path.resolve()).encode("utf-8"))
    hasher.update(b"\0")
    hasher.update(data)
    return hasher.hexdigest()


def detect_format(data: bytes) -> DocumentFormat:
    head = data.lstrip()[:64]
    if head.startswith(b"<?xml") or head.startswith(b"<!DOCTYPE plist") or head.startswith(b"<plist"):
        return DocumentFormat.XML
    return DocumentFormat.OPENSTEP


def decode_document(data: bytes, document_format: DocumentFormat) -> Any:
    if document_format == DocumentFormat.XML:
        try:
            return plistlib.loads(data, fmt=plistlib.FMT_XML)
        except Exception as e:
            raise IncompleteDataError(f"unreadable XML property list: {e}") from e
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidInputError(f"project file is not UTF-8 text: {e}") from e
    try:
        return osp.OpenStepDecoder.ParseFromString(text)
    except Exception as e:
        raise IncompleteDataError(f"unreadable project file: {e}") from e


def encode_document(document: Any, document_format: DocumentFormat) -> bytes:
    if document_format == DocumentFormat.XML:
        return plistlib.dumps(document, fmt=plistlib.FMT_XML, sort_keys=True)
    return format_xcode_project(document).encode("utf-8")


def encode_cjk(text: str) -> str:
    return "".join(
        f"&#{ord(char):04d};" if CJK_FIRST <= ord(char) <= CJK_LAST else char
        for char in text
    )


def encode_cjk_file(path: Path) -> None:
    text = path.read_text(encoding="utf-8")
    encoded = encode_cjk(text)
    if encoded != text:
        path.write_text(encoded, encoding="utf-8")


class ProjectFile:
    """Handle on one project document and the store parsed from it."""

    def __init__(self, path: Union[str, Path], config: Optional[Config] = None):
        self.config = config or Config()
        self.path = path
        self.project_path: Optional[Path] = None
        self.fingerprint: Optional[str] = None
        self.format: Optional[DocumentFormat] = None
        self.store: Optional[ObjectStore] = None

    @classmethod
    def open(cls, path: Union[str, Path], config: Optional[Config] = None) -> "ProjectFile":
        project = cls(path, config)
        project.reload_if_changed()
        return project

    @property
    def is_open(self) -> bool:
        return self.store is not None

    def reload_if_changed(self) -> ObjectStore:
        """Return the cached store, reparsing only if the file changed."""
        project_path = resolve_project_path(self.path, self.config)
        try:
            data = project_path.read_bytes()
        except OSError as e:
            raise InvalidInputError(f"cannot read {project_path}: {e}") from e

        current = fingerprint(project_path, data)
        if self.store is not None and current == self.fingerprint:
            logger.debug("%s unchanged, using cached store", project_path)
            return self.store

        document_format = detect_format(data)
        store = ObjectStore(
            decode_document(data, document_format), id_attempts=self.config.id_attempts
        )
        self.project_path = project_path
        self.fingerprint = current
        self.format = document_format
        self.store = store
        logger.debug("loaded %d objects from %s", len(store.objects), project_path)
        return store

    def close(self) -> None:
        self.store = None
        self.fingerprint = None
        self.format = None
        self.project_path = None

    def save(self) -> Status:
        """
        Write the store back to disk, then rewrite CJK characters.

        Returns:
            OK, NOT_LOADED, IO_FAILURE if the document could not be written,
            or ENCODE_FAILURE if the rewrite pass failed after the write.
        """
        if self.store is None or self.project_path is None or self.format is None:
            logger.error("no project loaded")
            return Status.NOT_LOADED
        try:
            data = encode_document(self.store.to_document(), self.format)
            self.project_path.write_bytes(data)
        except (OSError, TypeError, ValueError, OverflowError) as e:
            logger.error("saving %s failed: %s", self.project_path, e)
            return Status.IO_FAILURE
        try:
            encode_cjk_file(self.project_path)
            # the saved bytes are the new baseline for reload_if_changed
            self.fingerprint = fingerprint(self.project_path, self.project_path.read_bytes())
        except (OSError, UnicodeError) as e:
            logger.error("rewriting CJK characters in %s failed: %s", self.project_path, e)
            return Status.ENCODE_FAILURE
        return Status.OK
