import sys

from pbxedit import Config
from pbxedit.project import ProjectEditor
from pbxedit.project.status import Status

# command name -> ProjectEditor method taking a single string argument
EDIT_COMMANDS = {
    "link-framework": ProjectEditor.link_framework,
    "unlink-framework": ProjectEditor.unlink_framework,
    "link-library": ProjectEditor.link_static_library,
    "unlink-library": ProjectEditor.unlink_static_library,
    "add-file": ProjectEditor.add_file,
    "add-folder": ProjectEditor.add_folder,
    "add-group": ProjectEditor.add_group,
    "add-framework-search-path": ProjectEditor.set_framework_search_path,
    "remove-framework-search-path": ProjectEditor.remove_framework_search_path,
    "add-library-search-path": ProjectEditor.set_library_search_path,
    "remove-library-search-path": ProjectEditor.remove_library_search_path,
    "set-product-name": ProjectEditor.set_product_name,
    "set-bundle-id": ProjectEditor.set_bundle_id,
    "set-code-sign-style": ProjectEditor.set_code_sign_style,
}


def edit_main(editor: ProjectEditor, config: Config, command: str, value: str) -> int:
    if not value:
        print(f"ERROR: {command} requires a value", file=sys.stderr)
        return 2
    status = EDIT_COMMANDS[command](editor, value)
    print(f"{command} {value}: {status.value}")
    if status is not Status.OK:
        return 1
    saved = editor.save()
    if saved is not Status.OK:
        print(f"ERROR: saving project failed: {saved.value}", file=sys.stderr)
        return 1
    return 0
