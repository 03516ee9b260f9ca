"""
Type mapping module

Classifies host property descriptors into script types and provides the
script type names used in generated signatures.
"""

from enum import IntEnum
from types import MappingProxyType
from typing import Optional, TYPE_CHECKING

from .ir import PropertyFlags, PropertyKind, StructFlags
from .naming import rename_class

if TYPE_CHECKING:
    from .ir import EnumInfo, PropertyInfo, StructInfo


class SkTypeID(IntEnum):
    """Script type of a property. NONE means unsupported."""
    NONE = 0
    INTEGER = 1
    REAL = 2
    BOOLEAN = 3
    STRING = 4
    VECTOR2 = 5
    VECTOR3 = 6
    VECTOR4 = 7
    ROTATION = 8
    ROTATION_ANGLES = 9
    TRANSFORM = 10
    COLOR = 11
    NAME = 12
    ENUM = 13
    STRUCT = 14
    CLASS = 15
    OBJECT = 16
    LIST = 17


TYPE_ID_NAMES = MappingProxyType({
    SkTypeID.NONE: 'nil',
    SkTypeID.INTEGER: 'Integer',
    SkTypeID.REAL: 'Real',
    SkTypeID.BOOLEAN: 'Boolean',
    SkTypeID.STRING: 'String',
    SkTypeID.VECTOR2: 'Vector2',
    SkTypeID.VECTOR3: 'Vector3',
    SkTypeID.VECTOR4: 'Vector4',
    SkTypeID.ROTATION: 'Rotation',
    SkTypeID.ROTATION_ANGLES: 'RotationAngles',
    SkTypeID.TRANSFORM: 'Transform',
    SkTypeID.COLOR: 'Color',
    SkTypeID.NAME: 'Name',
    SkTypeID.ENUM: 'Enum',
    SkTypeID.STRUCT: 'UStruct',
    SkTypeID.CLASS: 'EntityClass',
    SkTypeID.OBJECT: 'Entity',
    SkTypeID.LIST: 'List',
})

# Host structs that map onto built-in script types
STRUCT_TYPE_IDS = MappingProxyType({
    'Vector2D': SkTypeID.VECTOR2,
    'Vector': SkTypeID.VECTOR3,
    'Vector_NetQuantize': SkTypeID.VECTOR3,
    'Vector_NetQuantizeNormal': SkTypeID.VECTOR3,
    'Vector4': SkTypeID.VECTOR4,
    'Quat': SkTypeID.ROTATION,
    'Rotator': SkTypeID.ROTATION_ANGLES,
    'Transform': SkTypeID.TRANSFORM,
    'Color': SkTypeID.COLOR,
    'LinearColor': SkTypeID.COLOR,
})

ROOT_CLASS_NAME = 'Object'

# Properties with these flags are never exported
UNSUPPORTED_PROPERTY_FLAGS = (
    PropertyFlags.EDITOR_ONLY
    | PropertyFlags.LAZY_REFERENCE
    | PropertyFlags.WEAK_REFERENCE
    | PropertyFlags.SOFT_OBJECT_REFERENCE
    | PropertyFlags.SOFT_CLASS_REFERENCE
)


def type_name(type_id: SkTypeID) -> str:
    """Get the script class name of a type id"""
    return TYPE_ID_NAMES[type_id]


def get_enum(prop: 'PropertyInfo') -> Optional['EnumInfo']:
    """Return the backing enum if the property is an enum, None otherwise"""
    if prop.kind in (PropertyKind.INTEGER, PropertyKind.ENUM):
        return prop.enum
    return None


def has_static_class(class_info: 'StructInfo') -> bool:
    """Check if a class exports its static class accessor"""
    return class_info.has_any_flags(StructFlags.REQUIRED_API | StructFlags.MINIMAL_API)


def is_struct_supported(struct: 'StructInfo') -> bool:
    return (not struct.is_class
            and struct.has_any_flags(StructFlags.HAS_DEFAULTS | StructFlags.REQUIRED_API))


def is_plain_old_data(struct: 'StructInfo') -> bool:
    return not struct.is_class and struct.has_any_flags(StructFlags.PLAIN_OLD_DATA)


def struct_type(struct: 'StructInfo') -> SkTypeID:
    """Classify a struct used as a property type"""
    type_id = STRUCT_TYPE_IDS.get(struct.name)
    if type_id is not None:
        return type_id
    return SkTypeID.STRUCT if is_struct_supported(struct) else SkTypeID.NONE


def classify(prop: 'PropertyInfo') -> SkTypeID:
    """Get the script type of a property"""
    kind = prop.kind

    # Simple types first
    if kind is PropertyKind.INTEGER and prop.enum is None:
        return SkTypeID.INTEGER
    if kind is PropertyKind.FLOAT:
        return SkTypeID.REAL
    if kind is PropertyKind.STRING:
        return SkTypeID.STRING
    if kind is PropertyKind.NAME:
        return SkTypeID.NAME
    if kind is PropertyKind.BOOLEAN:
        return SkTypeID.BOOLEAN

    if kind is PropertyKind.STRUCT:
        return struct_type(prop.struct) if prop.struct is not None else SkTypeID.NONE

    if get_enum(prop) is not None:
        return SkTypeID.ENUM
    if kind is PropertyKind.CLASS:
        return SkTypeID.CLASS

    if kind is PropertyKind.OBJECT:
        class_info = prop.property_class
        if class_info is not None and (has_static_class(class_info)
                                       or class_info.name == ROOT_CLASS_NAME):
            return SkTypeID.OBJECT
        return SkTypeID.NONE

    if kind is PropertyKind.ARRAY:
        # Reject arrays of unknown types and arrays of arrays
        inner = prop.inner
        if inner is not None and is_property_supported(inner) and classify(inner) != SkTypeID.LIST:
            return SkTypeID.LIST
        return SkTypeID.NONE

    return SkTypeID.NONE


def is_property_supported(prop: 'PropertyInfo') -> bool:
    if prop.has_any_flags(UNSUPPORTED_PROPERTY_FLAGS):
        return False
    return classify(prop) != SkTypeID.NONE


def display_name(prop: 'PropertyInfo') -> str:
    """Get the script type name of a property

    Examples:
        float -> Real
        Actor* -> Actor
        TArray<FVector> -> List{Vector3}
    """
    type_id = classify(prop)

    if type_id == SkTypeID.OBJECT:
        return rename_class(prop.property_class.name)
    if type_id == SkTypeID.STRUCT:
        return rename_class(prop.struct.name)
    if type_id == SkTypeID.ENUM:
        return get_enum(prop).name
    if type_id == SkTypeID.LIST:
        return f'List{{{display_name(prop.inner)}}}'

    return type_name(type_id)
