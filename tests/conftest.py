from __future__ import annotations

import pytest

from sk_gen.ir import StructInfo
from tests._fixtures.builders import make_class


@pytest.fixture
def hierarchy() -> dict[str, StructInfo]:
    """Object <- Actor <- Pawn <- Character <- PlayerCharacter"""
    obj = make_class("Object")
    actor = make_class("Actor", obj)
    pawn = make_class("Pawn", actor)
    character = make_class("Character", pawn)
    player = make_class("PlayerCharacter", character)
    return {s.name: s for s in (obj, actor, pawn, character, player)}
