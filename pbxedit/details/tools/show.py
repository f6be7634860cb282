from pbxedit import Config
from pbxedit.project import ProjectEditor


def show_main(editor: ProjectEditor, config: Config, command: str, value: str) -> int:
    store = editor.store
    assert store is not None
    print(f"project : {editor.project.project_path}")
    print(f"format : {editor.project.format.value}")
    print(f"objects : {len(store.objects):,}")
    print(f"application target : {store.primary_product_name or '-'}")
    print(f"product name : {editor.get_product_name() or '-'}")
    print(f"bundle id : {editor.get_bundle_id() or '-'}")
    return 0
