"""
Identifier renaming utilities

Converts host names (TitleCase, bBoolean prefix, ':'/' ' separators) into
script names (lower_case, trailing '?' for booleans, '@' for members).
"""

from types import MappingProxyType
import re
import zlib

# Forbidden variable names
RESERVED_KEYWORDS = frozenset({
    'branch', 'case', 'divert', 'else', 'exit', 'false', 'fork', 'if',
    'loop', 'nil', 'race', 'rush', 'skip', 'sync', 'this', 'this_class',
    'this_code', 'true', 'unless', 'when',
    # Boolean word operators
    'and', 'nand', 'nor', 'not', 'nxor', 'or', 'xor',
})

CLASS_NAME_RENAMES = MappingProxyType({
    # Collisions with built-in script classes
    'Object': 'Entity',
    'Class': 'EntityClass',
    'Enum': 'Enum2',
    # Static function libraries, their names occur very frequently in code
    'DataTableFunctionLibrary': 'DataLib',
    'GameplayStatics': 'GameLib',
    'HeadMountedDisplayFunctionLibrary': 'VRLib',
    'KismetArrayLibrary': 'ArrayLib',
    'KismetGuidLibrary': 'GuidLib',
    'KismetInputLibrary': 'InputLib',
    'KismetMaterialLibrary': 'MaterialLib',
    'KismetMathLibrary': 'MathLib',
    'KismetNodeHelperLibrary': 'NodeLib',
    'KismetStringLibrary': 'StringLib',
    'KismetSystemLibrary': 'SystemLib',
    'KismetTextLibrary': 'TextLib',
    'VisualLoggerKismetLibrary': 'LogLib',
})

# Content hash appended to generated host names
_HASH_SUFFIX_RE = re.compile(r'_[0-9a-f]{32}$')
_SOURCE_HASH_SUFFIX_RE = re.compile(r'_[0-9A-Fa-f]{32}$')

_SEPARATORS = ' :_'


def is_boolean_name(name: str) -> bool:
    """Check for the bBoolean naming convention (e.g. bIsDead)"""
    return len(name) > 2 and name[0] == 'b' and name[1].isupper()


def rename_class(name: str) -> str:
    """Map a host class name to its script class name

    Examples:
        Object -> Entity
        KismetMathLibrary -> MathLib
        Actor -> Actor
    """
    return CLASS_NAME_RENAMES.get(name, name)


def rename_variable(name: str, append_question_mark: bool = False, is_member: bool = False) -> str:
    """Convert a host name to a script variable name

    Examples:
        MaxHealth -> max_health
        bIsDead -> is_dead (is_dead? with append_question_mark)
        Health -> @health (is_member)
        if -> if_
    """
    if not name:
        return name

    source = _SOURCE_HASH_SUFFIX_RE.sub('', name) if len(name) > 33 else name

    chars = ['@'] if is_member else []
    was_upper = True
    was_underscore = True
    for c in source[1 if is_boolean_name(source) else 0:]:
        if c == '?':
            continue
        if c in _SEPARATORS:
            if not was_underscore:
                chars.append('_')
                was_underscore = True
            continue
        is_upper = c.isupper() or c.isdigit()
        if is_upper and not was_upper and not was_underscore:
            chars.append('_')
        chars.append(c.lower())
        was_upper = is_upper
        was_underscore = False
    result = ''.join(chars)

    if not is_member and result in RESERVED_KEYWORDS:
        result += '_'

    if len(result) > 33 and _HASH_SUFFIX_RE.search(result):
        result = result[:-33]

    if append_question_mark:
        result += '?'
    return result


def rename_method(name: str, return_is_boolean: bool = False) -> str:
    """Convert a host function name to a script method name

    A leading 'k2_' is dropped and 'set_foo' becomes 'foo_set'. Names that
    look like predicates (bFoo, Get.., Is.., Has.., Can..) get a trailing
    '?' only when the return type is confirmed boolean; a 'get_' prefix is
    dropped in that case as well.

    Examples:
        K2_GetActorLocation -> get_actor_location
        SetActorLocation -> actor_location_set
        IsValid -> is_valid? (return_is_boolean)
        GetIsEnabled -> is_enabled? (return_is_boolean)
    """
    method_name = rename_variable(name)
    is_boolean = False
    getter_name = None

    # Kismet 2 prefix
    if len(method_name) > 3 and not method_name[3].isdigit() and method_name.startswith('k2_'):
        method_name = method_name[3:]

    if len(method_name) > 4 and not method_name[4].isdigit():
        if method_name.startswith('get_'):
            getter_name = method_name[4:]
            is_boolean = True
        elif method_name.startswith('set_'):
            method_name = method_name[4:] + '_set'

    predicate_name = getter_name if getter_name is not None else method_name
    if is_boolean_name(name) or predicate_name.startswith(('is_', 'has_', 'can_')):
        is_boolean = True

    if is_boolean and return_is_boolean:
        return predicate_name + '?'
    return method_name


def symbol_id(text: str) -> int:
    """CRC-32 of the 8-bit encoded name, matching the script runtime's symbol ids"""
    return zlib.crc32(text.encode('latin-1', errors='replace'))
