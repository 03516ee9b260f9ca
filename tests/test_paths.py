"""Tests for sk_gen.paths."""

from __future__ import annotations

from pathlib import Path

import pytest

from sk_gen.errors import HierarchyError, InvalidConfiguration
from sk_gen.ir import StructInfo
from sk_gen.paths import ClassPathResolver, class_name, method_file_name
from tests._fixtures.builders import make_class, make_struct


def test_class_name_applies_renames(hierarchy: dict[str, StructInfo]) -> None:
    assert class_name(hierarchy["Object"]) == "Entity"
    assert class_name(hierarchy["Actor"]) == "Actor"
    assert class_name(make_class("KismetSystemLibrary")) == "SystemLib"


@pytest.mark.parametrize("depth", [0, -3])
def test_resolver_rejects_invalid_depth(tmp_path: Path, depth: int) -> None:
    with pytest.raises(InvalidConfiguration):
        ClassPathResolver(tmp_path, depth)


def test_class_path_nests_by_hierarchy(tmp_path: Path, hierarchy: dict[str, StructInfo]) -> None:
    resolver = ClassPathResolver(tmp_path, 8)

    assert resolver.class_path(hierarchy["Object"]) == tmp_path / "Object" / "Entity"
    assert resolver.class_path(hierarchy["Actor"]) == tmp_path / "Object" / "Entity" / "Actor"
    assert resolver.class_path(hierarchy["PlayerCharacter"]) == (
        tmp_path / "Object" / "Entity" / "Actor" / "Pawn" / "Character" / "PlayerCharacter"
    )


def test_class_path_flattens_deep_hierarchies(tmp_path: Path, hierarchy: dict[str, StructInfo]) -> None:
    resolver = ClassPathResolver(tmp_path, 3)

    # Two super classes become directories, the nearest one folds into the name
    assert resolver.class_path(hierarchy["PlayerCharacter"]) == (
        tmp_path / "Object" / "Entity" / "Actor" / "Character.PlayerCharacter"
    )
    assert resolver.class_path(hierarchy["Pawn"]) == tmp_path / "Object" / "Entity" / "Actor" / "Pawn"


def test_class_path_depth_one_never_nests(tmp_path: Path, hierarchy: dict[str, StructInfo]) -> None:
    resolver = ClassPathResolver(tmp_path, 1)

    assert resolver.class_path(hierarchy["Object"]) == tmp_path / "Object" / "Entity"
    assert resolver.class_path(hierarchy["Actor"]) == tmp_path / "Object" / "Entity.Actor"
    assert resolver.class_path(hierarchy["PlayerCharacter"]) == tmp_path / "Object" / "Character.PlayerCharacter"

    base = make_struct("TableRowBase")
    row = make_struct("ItemRow", base)
    assert resolver.class_path(row) == tmp_path / "Object" / "UStruct" / "TableRowBase.ItemRow"


def test_struct_paths_sit_below_ustruct(tmp_path: Path) -> None:
    base = make_struct("TableRowBase")
    row = make_struct("ItemRow", base)
    special = make_struct("WeaponRow", row)

    resolver = ClassPathResolver(tmp_path, 3)
    assert resolver.class_path(base) == tmp_path / "Object" / "UStruct" / "TableRowBase"
    assert resolver.class_path(row) == tmp_path / "Object" / "UStruct" / "TableRowBase" / "ItemRow"
    assert resolver.class_path(special) == tmp_path / "Object" / "UStruct" / "TableRowBase" / "ItemRow.WeaponRow"


def test_class_path_records_used_super_classes(tmp_path: Path, hierarchy: dict[str, StructInfo]) -> None:
    resolver = ClassPathResolver(tmp_path, 4)
    assert resolver.used_classes == []

    resolver.class_path(hierarchy["Pawn"])
    resolver.class_path(hierarchy["PlayerCharacter"])

    assert [s.name for s in resolver.used_classes] == ["Actor", "Object", "Character", "Pawn"]


def test_used_classes_are_per_resolver(tmp_path: Path, hierarchy: dict[str, StructInfo]) -> None:
    first = ClassPathResolver(tmp_path, 4)
    second = ClassPathResolver(tmp_path, 4)
    first.class_path(hierarchy["Actor"])
    assert second.used_classes == []


def test_method_paths(tmp_path: Path, hierarchy: dict[str, StructInfo]) -> None:
    resolver = ClassPathResolver(tmp_path, 4)
    actor_path = tmp_path / "Object" / "Entity" / "Actor"

    assert resolver.method_path(hierarchy["Actor"], "is_hidden?", False) == actor_path / "is_hidden-Q().sk"
    assert resolver.method_path(hierarchy["Actor"], "spawn", True) == actor_path / "spawn()C.sk"


def test_method_file_name() -> None:
    assert method_file_name("valid?", False) == "valid-Q().sk"
    assert method_file_name("valid?", True) == "valid-Q()C.sk"
    assert method_file_name("jump", False) == "jump().sk"


def test_cyclic_hierarchy_is_fatal(tmp_path: Path) -> None:
    a = make_class("A")
    b = make_class("B", a)
    a.super_struct = b

    with pytest.raises(HierarchyError):
        ClassPathResolver(tmp_path, 4).class_path(b)
