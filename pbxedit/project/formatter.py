"""
Xcode project file formatter.

This module turns a project document (the generic map/list/string tree an
ObjectStore is saved as) back into the OpenStep text Xcode writes. Objects are
emitted in per-isa sections and identifiers are annotated with the same kind of
comments Xcode produces, so edited files diff cleanly against Xcode's output.
"""

import re
from typing import Any, Dict, List

# Strings made only of these characters are written without quotes
UNQUOTED = re.compile(r"^[A-Za-z0-9_.]+$")

# Objects Xcode writes on a single line
INLINE_ISAS = frozenset({"PBXBuildFile", "PBXFileReference"})

ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
}

PHASE_COMMENTS = {
    "PBXSourcesBuildPhase": "Sources",
    "PBXFrameworksBuildPhase": "Frameworks",
    "PBXResourcesBuildPhase": "Resources",
    "PBXHeadersBuildPhase": "Headers",
    "PBXCopyFilesBuildPhase": "CopyFiles",
    "PBXShellScriptBuildPhase": "ShellScript",
}


def format_xcode_project(document: Dict[str, Any]) -> str:
    """
    Convert a project document to its OpenStep string representation.

    Args:
        document: The top-level map (archiveVersion, objects, rootObject, ...).

    Returns:
        A string containing the formatted Xcode project file content.
    """
    objects = document.get("objects") or {}
    comments = collect_comments(objects, document.get("rootObject"))

    # Start with the UTF-8 marker
    result = "// !$*UTF8*$!\n"
    result += "{\n"
    for key in sorted(document.keys()):
        if key == "objects":
            result += f"\tobjects = {format_objects(objects, comments)};\n"
        else:
            result += f"\t{format_key(key)} = {format_value(document[key], 1, comments)};\n"
    result += "}\n"
    return result


def collect_comments(objects: Dict[str, Any], root_id: Any) -> Dict[str, str]:
    """
    Build the identifier -> comment map used to annotate references.

    Args:
        objects: The objects map of the document.
        root_id: Identifier of the project object.

    Returns:
        A dictionary of comments keyed by object identifier.
    """
    comments: Dict[str, str] = {}
    phase_of: Dict[str, str] = {}
    for object_id, fields in objects.items():
        if not isinstance(fields, dict):
            continue
        isa = fields.get("isa")
        if isa in PHASE_COMMENTS:
            name = fields.get("name") or PHASE_COMMENTS[isa]
            comments[object_id] = name
            for file_id in fields.get("files") or []:
                phase_of[file_id] = name
        elif isa == "XCConfigurationList":
            comments[object_id] = "Build configuration list"
        elif fields.get("name") or fields.get("path"):
            comments[object_id] = str(fields.get("name") or fields.get("path"))
    # Build files are described by the file they reference
    for object_id, fields in objects.items():
        if isinstance(fields, dict) and fields.get("isa") == "PBXBuildFile":
            file_comment = comments.get(fields.get("fileRef"), "(null)")
            comments[object_id] = f"{file_comment} in {phase_of.get(object_id, '(null)')}"
    if isinstance(root_id, str):
        comments[root_id] = "Project object"
    return comments


def format_objects(objects: Dict[str, Any], comments: Dict[str, str]) -> str:
    sections: Dict[str, List[str]] = {}
    for object_id in objects:
        fields = objects[object_id]
        isa = fields.get("isa", "") if isinstance(fields, dict) else ""
        sections.setdefault(isa, []).append(object_id)

    result = "{\n"
    for isa in sorted(sections.keys()):
        result += f"\n/* Begin {isa} section */\n"
        for object_id in sorted(sections[isa]):
            fields = objects[object_id]
            key = format_reference(object_id, comments)
            if isa in INLINE_ISAS and isinstance(fields, dict):
                result += f"\t\t{key} = {format_inline_dict(fields, comments)};\n"
            else:
                result += f"\t\t{key} = {format_value(fields, 2, comments, isa_first=True)};\n"
        result += f"/* End {isa} section */\n"
    result += "\t}"
    return result


def format_value(
    value: Any, indent_level: int, comments: Dict[str, str], isa_first: bool = False
) -> str:
    """
    Format a value based on its type.

    Args:
        value: The value to format.
        indent_level: The current indentation level.
        comments: Identifier comments used to annotate references.
        isa_first: Write the `isa` key before the other keys of a map.

    Returns:
        A string representing the formatted value.
    """
    # Handle None
    if value is None:
        return "(null)"

    # Handle lists
    elif isinstance(value, list):
        return format_list(value, indent_level, comments)

    # Handle dictionaries
    elif isinstance(value, dict):
        return format_dict(value, indent_level, comments, isa_first)

    # Handle basic types, Xcode represents booleans as 0/1
    elif isinstance(value, bool):
        return "1" if value else "0"
    elif isinstance(value, (int, float)):
        return str(value)

    # Handle strings, identifiers get their comment
    elif isinstance(value, str):
        if value in comments:
            return format_reference(value, comments)
        return format_string(value)

    # Raise exception for unknown types
    else:
        raise TypeError(f"Unsupported type: {type(value).__name__} for value: {value}")


def ordered_keys(value_dict: Dict[str, Any], isa_first: bool) -> List[str]:
    # Sort keys for consistent output
    keys = sorted(value_dict.keys())
    if isa_first and "isa" in value_dict:
        keys.remove("isa")
        keys.insert(0, "isa")
    return keys


def format_dict(
    value_dict: Dict[str, Any],
    indent_level: int,
    comments: Dict[str, str],
    isa_first: bool = False,
) -> str:
    """
    Format a dictionary.

    Args:
        value_dict: The dictionary to format.
        indent_level: The current indentation level.
        comments: Identifier comments used to annotate references.
        isa_first: Write the `isa` key before the other keys.

    Returns:
        A string representing the formatted dictionary.
    """
    indent = "\t" * indent_level
    inner_indent = "\t" * (indent_level + 1)

    # Empty dictionaries should have braces on separate lines for Xcode compatibility
    if not value_dict:
        return "{\n" + indent + "}"

    result = "{\n"
    for key in ordered_keys(value_dict, isa_first):
        value = value_dict[key]
        if value is None:
            continue
        formatted_value = format_value(value, indent_level + 1, comments)
        result += f"{inner_indent}{format_key(key)} = {formatted_value};\n"

    result += f"{indent}}}"
    return result


def format_inline_dict(value_dict: Dict[str, Any], comments: Dict[str, str]) -> str:
    result = "{"
    for key in ordered_keys(value_dict, True):
        value = value_dict[key]
        if value is None:
            continue
        if isinstance(value, list):
            items = "".join(f"{format_value(item, 0, comments)}, " for item in value)
            formatted_value = f"({items})"
        elif isinstance(value, dict):
            formatted_value = format_inline_dict(value, comments)
        else:
            formatted_value = format_value(value, 0, comments)
        result += f"{format_key(key)} = {formatted_value}; "
    return result + "}"


def format_list(value_list: List[Any], indent_level: int, comments: Dict[str, str]) -> str:
    """
    Format a list.

    Args:
        value_list: The list to format.
        indent_level: The current indentation level.
        comments: Identifier comments used to annotate references.

    Returns:
        A string representing the formatted list.
    """
    if not value_list:
        return "(\n" + "\t" * indent_level + ")"

    indent = "\t" * indent_level
    inner_indent = "\t" * (indent_level + 1)

    result = "(\n"
    for item in value_list:
        result += f"{inner_indent}{format_value(item, indent_level + 1, comments)},\n"
    result += f"{indent})"
    return result


def format_reference(object_id: str, comments: Dict[str, str]) -> str:
    comment = comments.get(object_id)
    if comment:
        comment = comment.replace("*/", "*")
        return f"{format_string(object_id)} /* {comment} */"
    return format_string(object_id)


def format_key(key: str) -> str:
    return format_string(str(key))


def format_string(value: str) -> str:
    if UNQUOTED.match(value):
        return value
    escaped = "".join(ESCAPES.get(char, char) for char in value)
    return f'"{escaped}"'
