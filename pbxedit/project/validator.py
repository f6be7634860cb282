from typing import List

from pbxedit.project.model import PBXBuildFile, PBXFileReference
from pbxedit.project.store import ObjectStore


def validate_references(store: ObjectStore) -> List[str]:
    errors = []
    for obj in store.objects.values():
        for index, ref in enumerate(obj.references()):
            if not isinstance(ref, str):
                errors.append(f"Invalid reference in {obj.isa} {obj.id}[{index}]: {ref!r}")
            elif ref not in store.objects:
                errors.append(f"Invalid reference in {obj.isa} {obj.id}: {ref}")
    return errors


def validate_build_files(store: ObjectStore) -> List[str]:
    errors = []
    for build_file in store.of_type(PBXBuildFile):
        target = store.get(build_file.file_ref) if build_file.file_ref else None
        # build files may also point at product references of other projects
        if target is not None and not isinstance(target, PBXFileReference):
            if target.isa not in ("PBXReferenceProxy", "PBXVariantGroup", "XCVersionGroup"):
                errors.append(
                    f"Build file {build_file.id} references a {target.isa}: {target.id}"
                )
    return errors
