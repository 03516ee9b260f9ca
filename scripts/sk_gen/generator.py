"""
Generation run module

Bundles the per-run state (used super classes, staged files) so repeated
or parallel runs never share it.
"""

from pathlib import Path
from typing import TYPE_CHECKING

from .config import GeneratorConfig
from .log import get_logger
from .naming import rename_method
from .paths import ClassPathResolver, class_name
from .writer import ScriptFileWriter

if TYPE_CHECKING:
    from .ir import FunctionInfo, StructInfo

logger = get_logger('generator')


class GenerationRun:
    """One pass of script generation

    Use as a context manager to commit staged files on success:

        with GenerationRun(config) as run:
            run.write_if_changed(run.method_path(actor, 'jump', False), text)
    """

    def __init__(self, config: GeneratorConfig):
        config.validate()
        self.config = config
        self.resolver = ClassPathResolver(config.scripts_path, config.path_depth)
        self.writer = ScriptFileWriter(encoding=config.encoding, temp_suffix=config.temp_suffix)

    def __enter__(self) -> 'GenerationRun':
        logger.info('generating scripts into %s (path depth %d)',
                    self.config.scripts_path, self.config.path_depth)
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is None:
            self.commit()
        else:
            logger.error('generation aborted, %d staged file(s) left in place',
                         len(self.writer.pending))
        return False

    @property
    def used_classes(self) -> list['StructInfo']:
        return self.resolver.used_classes

    def class_name(self, struct: 'StructInfo') -> str:
        return class_name(struct)

    def class_path(self, struct: 'StructInfo') -> Path:
        return self.resolver.class_path(struct)

    def method_path(self, struct: 'StructInfo', method_name: str, is_static: bool) -> Path:
        return self.resolver.method_path(struct, method_name, is_static)

    def function_path(self, struct: 'StructInfo', func: 'FunctionInfo') -> Path:
        """Get the script file path of a host function bound as a method"""
        method_name = rename_method(func.name, func.returns_boolean)
        return self.method_path(struct, method_name, func.is_static)

    def write_if_changed(self, path, content: str) -> bool:
        return self.writer.write_if_changed(path, content)

    def commit(self) -> int:
        return self.writer.commit()
