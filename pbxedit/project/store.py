# Object store.
#
# Holds every object of one loaded .pbxproj keyed by identifier, together with
# the anchors resolved at load time (root object, main group, primary product).

import logging
from typing import Any, Dict, Iterator, List, Optional, Type, TypeVar

from pbxedit.project.model import (
    ID_LENGTH,
    BuildPhaseKind,
    PBXBuildPhase,
    PBXNativeTarget,
    PBXObject,
    PBXProject,
    ProductType,
    XcodeID,
    generate_id,
    make_object,
)
from pbxedit.project.status import IncompleteDataError

logger = logging.getLogger(__name__)

ObjectT = TypeVar("ObjectT", bound=PBXObject)

DEFAULT_ID_ATTEMPTS = 32


class ObjectStore:
    def __init__(self, document: Dict[str, Any], id_attempts: int = DEFAULT_ID_ATTEMPTS):
        if not isinstance(document, dict):
            raise IncompleteDataError("project document is not a map")
        raw_objects = document.get("objects")
        if not isinstance(raw_objects, dict) or not raw_objects:
            raise IncompleteDataError("project document has no objects")
        self.document = document
        self.id_attempts = id_attempts
        try:
            self.objects: Dict[XcodeID, PBXObject] = {
                XcodeID(key): make_object(key, value) for key, value in raw_objects.items()
            }
        except TypeError as e:
            raise IncompleteDataError(f"malformed object record: {e}") from e

        root_id = document.get("rootObject")
        root = self.objects.get(root_id) if isinstance(root_id, str) else None
        if not isinstance(root, PBXProject):
            raise IncompleteDataError(f"root object {root_id!r} is missing")
        if root.main_group not in self.objects:
            raise IncompleteDataError(f"main group {root.main_group!r} is missing")
        self.root_object_id = XcodeID(root_id)
        self.main_group_id = XcodeID(root.main_group)
        self.primary_product_name = self._find_primary_product_name(root)

    def _find_primary_product_name(self, root: PBXProject) -> str:
        for target_id in root.targets:
            target = self.objects.get(target_id)
            if (
                isinstance(target, PBXNativeTarget)
                and target.product_type == ProductType.APPLICATION.value
            ):
                return target.name
        return ""

    @property
    def root(self) -> PBXProject:
        root = self.objects[self.root_object_id]
        assert isinstance(root, PBXProject)
        return root

    @property
    def main_group(self) -> PBXObject:
        return self.objects[self.main_group_id]

    def generate_id(self) -> XcodeID:
        """Return an identifier not used by any object in the store.

        Raises RuntimeError if the store is empty or if `id_attempts` random
        draws all collide.
        """
        if not self.objects:
            raise RuntimeError("cannot generate identifiers for an empty store")
        taken = {key for key in self.objects if len(key) == ID_LENGTH}
        for _ in range(self.id_attempts):
            candidate = generate_id()
            if candidate not in taken:
                return candidate
            logger.debug("identifier collision on %s, retrying", candidate)
        raise RuntimeError(f"no free identifier after {self.id_attempts} attempts")

    def get(self, object_id: str) -> Optional[PBXObject]:
        return self.objects.get(XcodeID(object_id))

    def add(self, fields: Dict[str, Any]) -> PBXObject:
        obj = make_object(self.generate_id(), fields)
        self.objects[obj.id] = obj
        return obj

    def remove(self, object_id: str) -> Optional[PBXObject]:
        return self.objects.pop(XcodeID(object_id), None)

    def of_type(self, object_type: Type[ObjectT]) -> Iterator[ObjectT]:
        for obj in list(self.objects.values()):
            if isinstance(obj, object_type):
                yield obj

    def build_phases(self, kind: BuildPhaseKind) -> List[PBXBuildPhase]:
        return [phase for phase in self.of_type(PBXBuildPhase) if phase.kind == kind]

    def find_equal(self, fields: Dict[str, Any]) -> List[PBXObject]:
        """All objects whose record equals `fields`, in store order."""
        return [obj for obj in self.objects.values() if obj.has_content(fields)]

    def to_document(self) -> Dict[str, Any]:
        document = dict(self.document)
        document["objects"] = {obj.id: obj.fields for obj in self.objects.values()}
        return document
