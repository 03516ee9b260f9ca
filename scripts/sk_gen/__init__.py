"""
sk_gen - script binding helpers for a host object model

Translates host metadata (classes, structs, properties, enums, functions)
into script identifiers, script type names and script file paths, and
writes generated script files only where they changed.
"""

from .ir import (
    HostModel, StructInfo, PropertyInfo, FunctionInfo, EnumInfo,
    PropertyKind, PropertyFlags, StructFlags,
)
from .errors import GeneratorError, InvalidConfiguration, IOFailure, HierarchyError, ModelError
from .naming import rename_variable, rename_method, rename_class, is_boolean_name, symbol_id
from .types import (
    SkTypeID, classify, display_name, type_name, get_enum, has_static_class,
    is_property_supported, is_struct_supported, is_plain_old_data, struct_type,
)
from .paths import ClassPathResolver, class_name, method_file_name
from .writer import ScriptFileWriter
from .comments import comment_block
from .config import GeneratorConfig, read_scripts_path_depth
from .generator import GenerationRun

__all__ = [
    'HostModel', 'StructInfo', 'PropertyInfo', 'FunctionInfo', 'EnumInfo',
    'PropertyKind', 'PropertyFlags', 'StructFlags',
    'GeneratorError', 'InvalidConfiguration', 'IOFailure', 'HierarchyError', 'ModelError',
    'rename_variable', 'rename_method', 'rename_class', 'is_boolean_name', 'symbol_id',
    'SkTypeID', 'classify', 'display_name', 'type_name', 'get_enum', 'has_static_class',
    'is_property_supported', 'is_struct_supported', 'is_plain_old_data', 'struct_type',
    'ClassPathResolver', 'class_name', 'method_file_name',
    'ScriptFileWriter',
    'comment_block',
    'GeneratorConfig', 'read_scripts_path_depth',
    'GenerationRun',
]
