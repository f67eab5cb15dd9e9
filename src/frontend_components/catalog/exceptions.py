"""Errors raised by catalogue lookups."""


class ComponentError(Exception):
    """Base class for component lookup failures."""

    pass


class UnknownFrameworkError(ComponentError):
    """Raised when a framework id is not known or not indexed."""

    def __init__(self, framework: str):
        super().__init__(f"Unknown framework: {framework}")
        self.framework = framework


class InvalidPathError(ComponentError):
    """Raised when a relative path escapes the component root."""

    def __init__(self, path: str):
        super().__init__("Invalid path.")
        self.path = path


class ComponentNotFoundError(ComponentError):
    """Raised when a component file does not exist."""

    def __init__(self, path: str):
        super().__init__(f"File not found: {path}")
        self.path = path
