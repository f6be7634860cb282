class Config:
    def __init__(
        self,
        print_log: bool = True,
        log_level: str = "INFO",
        id_attempts: int = 32,
        project_file: str = "project.pbxproj",
        **kwargs
    ):
        self.print_log = print_log
        self.log_level = log_level
        # upper bound on identifier collisions before giving up
        self.id_attempts = id_attempts
        # document location inside a .xcodeproj bundle
        self.project_file = project_file
        self.__dict__.update(kwargs)
