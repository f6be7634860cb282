from argparse import ArgumentParser
import sys

from pbxedit import Config
from pbxedit.details.log import configure_logging
from pbxedit.details.tools.edit import EDIT_COMMANDS, edit_main
from pbxedit.details.tools.show import show_main
from pbxedit.details.tools.validate import validate_main
from pbxedit.project import ProjectEditor
from pbxedit.project.status import ProjectLoadError


def main(argv=None):
    COMMANDS = {name: edit_main for name in EDIT_COMMANDS}
    COMMANDS.update(
        {
            "show": show_main,
            "validate": validate_main,
        }
    )
    # parse common arguments...
    parser = ArgumentParser(prog="pbxedit")
    parser.add_argument("command", choices=COMMANDS.keys())
    parser.add_argument("value", nargs="?", default="")
    parser.add_argument("--project", type=str, required=True)
    parser.add_argument("--quiet", action="store_true", help="Do not print log messages")
    parser.add_argument("--log-level", type=str, default="INFO")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    config = Config(print_log=not args.quiet, log_level=args.log_level)
    configure_logging(config)
    # load the project once for the command...
    editor = ProjectEditor(config)
    try:
        editor.load(args.project)
    except ProjectLoadError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return COMMANDS[args.command](
        editor=editor,
        config=config,
        command=args.command,
        value=args.value,
    )


if __name__ == "__main__":
    sys.exit(main())
