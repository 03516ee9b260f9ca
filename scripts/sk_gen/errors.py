"""
Error types

Unsupported types are not errors: they classify as SkTypeID.NONE and the
caller skips them. Everything here aborts the generation run.
"""


class GeneratorError(RuntimeError):
    """Base class for errors that abort a generation run"""


class InvalidConfiguration(GeneratorError):
    """Raised when generator settings are out of range"""


class IOFailure(GeneratorError):
    """Raised when staging or committing a script file fails"""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class HierarchyError(GeneratorError):
    """Raised when a struct's ancestor chain does not terminate"""


class ModelError(GeneratorError):
    """Raised when a host model dump references unknown declarations"""
