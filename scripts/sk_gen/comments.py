"""
Comment block generation

Turns host tooltips into '//' comment blocks placed at the top of
generated script files.
"""

import re
from typing import Union

from .ir import EnumInfo, FunctionInfo, PropertyInfo, StructInfo
from .naming import rename_variable

_PARAM_RE = re.compile(r'(@param\s*)(\w*)', re.IGNORECASE)

Field = Union[FunctionInfo, StructInfo, PropertyInfo, EnumInfo]


def field_kind(field: Field) -> str:
    """Describe what kind of host declaration a descriptor is"""
    if isinstance(field, FunctionInfo):
        return 'method'
    if isinstance(field, StructInfo):
        return 'class' if field.is_class else 'struct'
    if isinstance(field, PropertyInfo):
        return 'property'
    if isinstance(field, EnumInfo):
        return 'enum'
    return 'field'


def comment_block(field: Field) -> str:
    """Build the comment block for a declaration

    Example (tooltip 'Moves the actor.\\n@param NewLocation target'):
        // Moves the actor.
        // @param new_location target
        //
        // UE4 name of this method: K2_SetActorLocation
    """
    block = ''
    if field.tooltip:
        block = '// ' + field.tooltip.replace('\n', '\n// ') + '\n'
        # Parameter names as they appear in script
        block = _PARAM_RE.sub(lambda m: m.group(1) + rename_variable(m.group(2)), block)

    block += f'//\n// UE4 name of this {field_kind(field)}: {field.name}\n'
    if field.category:
        block += f'// Blueprint category: {field.category}\n'
    return block + '\n'
