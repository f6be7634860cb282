from pbxedit.config import Config
from pbxedit.project import ProjectEditor
from pbxedit.project.model import CodeSignStyle
from pbxedit.project.persistence import ProjectFile
from pbxedit.project.status import (
    IncompleteDataError,
    InvalidInputError,
    ProjectLoadError,
    Status,
)
