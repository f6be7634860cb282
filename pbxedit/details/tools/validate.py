from pbxedit import Config
from pbxedit.project import ProjectEditor


def validate_main(editor: ProjectEditor, config: Config, command: str, value: str) -> int:
    errors = editor.validate()
    for error in errors:
        print(error)
    if errors:
        print(f"\n{len(errors)} problems found")
        return 1
    print("no problems found")
    return 0
