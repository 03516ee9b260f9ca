"""
Script file layout module

Script files are nested by class hierarchy below the scripts root:

    <root>/Object/<super>/<super>/.../<Class>/<method>().sk

Only a limited number of super classes become directories (long paths
break on some file systems). When the nesting budget runs out, the
immediate super class is folded into the last segment as '<Super>.<Class>'.
"""

from pathlib import Path
import threading
from typing import TYPE_CHECKING

from .errors import InvalidConfiguration
from .log import get_logger
from .naming import rename_class

if TYPE_CHECKING:
    from .ir import StructInfo

logger = get_logger('paths')

CLASS_ROOT = 'Object'
STRUCT_ROOT = 'Object/UStruct'


def class_name(struct: 'StructInfo') -> str:
    """Get the script class name of a class or struct"""
    return rename_class(struct.name)


def method_file_name(method_name: str, is_static: bool) -> str:
    """Get the file name of a method script

    '?' is not allowed in file names on all platforms, so it is spelled '-Q'.
    """
    suffix = '()C.sk' if is_static else '().sk'
    return method_name.replace('?', '-Q') + suffix


class ClassPathResolver:
    """Computes script file paths and tracks super classes in use"""

    def __init__(self, scripts_path, path_depth: int):
        if path_depth < 1:
            raise InvalidConfiguration(f'scripts path depth must be at least 1, got {path_depth}')
        self.scripts_path = Path(scripts_path)
        self.path_depth = path_depth
        # Insertion ordered set, descriptors hash by identity
        self._used_classes: dict['StructInfo', None] = {}
        self._lock = threading.Lock()

    @property
    def used_classes(self) -> list['StructInfo']:
        """All super classes walked so far, in the order they were first seen"""
        return list(self._used_classes)

    def class_path(self, struct: 'StructInfo') -> Path:
        """Get the directory holding the scripts of a class or struct"""
        name = class_name(struct)

        # Nearest super class first
        super_stack = list(struct.ancestors())
        self._mark_used(super_stack)

        if struct.is_class:
            max_nesting = max(self.path_depth - 1, 0)
            path = self.scripts_path / CLASS_ROOT
        else:
            max_nesting = max(self.path_depth - 2, 0)
            path = self.scripts_path / STRUCT_ROOT

        # Outermost super classes become directories
        for _ in range(min(max_nesting, len(super_stack))):
            path /= class_name(super_stack.pop())
        if super_stack:
            name = f'{class_name(super_stack[0])}.{name}'
        return path / name

    def method_path(self, struct: 'StructInfo', method_name: str, is_static: bool) -> Path:
        """Get the file path of a method script"""
        return self.class_path(struct) / method_file_name(method_name, is_static)

    def _mark_used(self, supers: list['StructInfo']):
        with self._lock:
            for super_struct in supers:
                if super_struct not in self._used_classes:
                    logger.debug('super class in use: %s', super_struct.name)
                    self._used_classes[super_struct] = None
