"""
IR (Intermediate Representation) module

Read-only descriptors of the host object model (structs, classes,
properties, enums, functions). The core only reads these; they are built
once by whoever enumerates the host and are never mutated afterwards.
"""

from dataclasses import dataclass, field
from enum import Enum, Flag, auto
from typing import Iterator, Optional
import json

from .errors import HierarchyError, ModelError

# Upper bound on ancestor chain length, the host model never gets close
MAX_HIERARCHY_DEPTH = 256


class PropertyKind(Enum):
    """Declared kind of a property"""
    INTEGER = 'integer'
    FLOAT = 'float'
    STRING = 'string'
    NAME = 'name'
    BOOLEAN = 'boolean'
    STRUCT = 'struct'
    ENUM = 'enum'
    OBJECT = 'object'
    CLASS = 'class'
    ARRAY = 'array'
    OTHER = 'other'


class PropertyFlags(Flag):
    NONE = 0
    EDITOR_ONLY = auto()
    LAZY_REFERENCE = auto()
    WEAK_REFERENCE = auto()
    SOFT_OBJECT_REFERENCE = auto()
    SOFT_CLASS_REFERENCE = auto()


class StructFlags(Flag):
    NONE = 0
    HAS_DEFAULTS = auto()
    REQUIRED_API = auto()
    MINIMAL_API = auto()
    PLAIN_OLD_DATA = auto()


@dataclass(eq=False)
class EnumInfo:
    """Enum type information"""
    name: str
    items: list[str] = field(default_factory=list)
    tooltip: str = ''
    category: str = ''


@dataclass(eq=False)
class PropertyInfo:
    """Property (member, parameter or return value) information"""
    name: str
    kind: PropertyKind
    flags: PropertyFlags = PropertyFlags.NONE
    struct: Optional['StructInfo'] = None          # STRUCT: the struct type
    property_class: Optional['StructInfo'] = None  # OBJECT/CLASS: the referenced class
    enum: Optional[EnumInfo] = None                # INTEGER/ENUM: backing enum
    inner: Optional['PropertyInfo'] = None         # ARRAY: element descriptor
    owner: Optional['StructInfo'] = None
    tooltip: str = ''
    category: str = ''

    def has_any_flags(self, flags: PropertyFlags) -> bool:
        return bool(self.flags & flags)


@dataclass(eq=False)
class FunctionInfo:
    """Function (method) information"""
    name: str
    params: list[PropertyInfo] = field(default_factory=list)
    return_property: Optional[PropertyInfo] = None
    is_static: bool = False
    tooltip: str = ''
    category: str = ''

    @property
    def returns_boolean(self) -> bool:
        return (self.return_property is not None
                and self.return_property.kind is PropertyKind.BOOLEAN)


@dataclass(eq=False)
class StructInfo:
    """Struct or class information"""
    name: str
    super_struct: Optional['StructInfo'] = None
    is_class: bool = False
    flags: StructFlags = StructFlags.NONE
    properties: list[PropertyInfo] = field(default_factory=list)
    functions: list[FunctionInfo] = field(default_factory=list)
    tooltip: str = ''
    category: str = ''

    def has_any_flags(self, flags: StructFlags) -> bool:
        return bool(self.flags & flags)

    def ancestors(self) -> Iterator['StructInfo']:
        """Yield super structs, nearest first, up to the root"""
        super_p = self.super_struct
        for _ in range(MAX_HIERARCHY_DEPTH):
            if super_p is None:
                return
            if super_p is self:
                break
            yield super_p
            super_p = super_p.super_struct
        raise HierarchyError(f"ancestor chain of '{self.name}' does not terminate")


@dataclass
class HostModel:
    """Snapshot of the host object model"""
    structs: dict[str, StructInfo]
    enums: dict[str, EnumInfo]

    @classmethod
    def load(cls, json_path: str) -> 'HostModel':
        """Load a host model dump from a JSON file"""
        with open(json_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict) -> 'HostModel':
        """Create a host model from a dictionary

        References (super, struct, class, enum) are given by name and are
        resolved after every declaration has been read.
        """
        enums = {}
        for decl in data.get('enums', []):
            enum = EnumInfo(
                name=decl['name'],
                items=list(decl.get('items', [])),
                tooltip=decl.get('tooltip', ''),
                category=decl.get('category', ''),
            )
            enums[enum.name] = enum

        structs = {}
        for decl in data.get('structs', []):
            struct = StructInfo(
                name=decl['name'],
                is_class=decl.get('is_class', False),
                flags=_parse_flags(StructFlags, decl.get('flags', [])),
                tooltip=decl.get('tooltip', ''),
                category=decl.get('category', ''),
            )
            structs[struct.name] = struct

        model = cls(structs=structs, enums=enums)
        for decl in data.get('structs', []):
            model._resolve_struct(structs[decl['name']], decl)
        return model

    def get_struct(self, name: str) -> StructInfo:
        if name not in self.structs:
            raise ModelError(f"unknown struct or class '{name}'")
        return self.structs[name]

    def get_enum(self, name: str) -> EnumInfo:
        if name not in self.enums:
            raise ModelError(f"unknown enum '{name}'")
        return self.enums[name]

    def classes(self) -> list[StructInfo]:
        return [s for s in self.structs.values() if s.is_class]

    def plain_structs(self) -> list[StructInfo]:
        return [s for s in self.structs.values() if not s.is_class]

    def _resolve_struct(self, struct: StructInfo, decl: dict):
        if decl.get('super'):
            struct.super_struct = self.get_struct(decl['super'])
        struct.properties = [self._parse_property(p, struct) for p in decl.get('properties', [])]
        struct.functions = [self._parse_function(f, struct) for f in decl.get('functions', [])]

    def _parse_function(self, decl: dict, owner: StructInfo) -> FunctionInfo:
        ret = decl.get('return')
        return FunctionInfo(
            name=decl['name'],
            params=[self._parse_property(p, owner) for p in decl.get('params', [])],
            return_property=self._parse_property(ret, owner) if ret else None,
            is_static=decl.get('is_static', False),
            tooltip=decl.get('tooltip', ''),
            category=decl.get('category', ''),
        )

    def _parse_property(self, decl: dict, owner: Optional[StructInfo]) -> PropertyInfo:
        try:
            kind = PropertyKind(decl['kind'])
        except ValueError:
            raise ModelError(f"unknown property kind '{decl['kind']}'") from None

        prop = PropertyInfo(
            name=decl.get('name', ''),
            kind=kind,
            flags=_parse_flags(PropertyFlags, decl.get('flags', [])),
            owner=owner,
            tooltip=decl.get('tooltip', ''),
            category=decl.get('category', ''),
        )
        if 'struct' in decl:
            prop.struct = self.get_struct(decl['struct'])
        if 'class' in decl:
            prop.property_class = self.get_struct(decl['class'])
        if 'enum' in decl:
            prop.enum = self.get_enum(decl['enum'])
        if 'inner' in decl:
            prop.inner = self._parse_property(decl['inner'], owner)
        return prop


def _parse_flags(flag_type, names: list[str]):
    """Combine flag names like 'editor_only' into a flag value"""
    flags = flag_type.NONE
    for name in names:
        try:
            flags |= flag_type[name.upper()]
        except KeyError:
            raise ModelError(f"unknown {flag_type.__name__} value '{name}'") from None
    return flags
