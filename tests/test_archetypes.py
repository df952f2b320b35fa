from dwarfgame.archetypes import ArchetypeID, ArchetypeManager, SystemType


def test_systems_stored_per_type():
    manager = ArchetypeManager()
    collider, movement, graphics = object(), object(), object()
    manager.add_archetype_systems(ArchetypeID.DWARF_PLAYER, [movement, collider], graphics)
    assert manager.get_systems(ArchetypeID.DWARF_PLAYER, SystemType.LOGIC) == [movement, collider]
    assert manager.get_systems(ArchetypeID.DWARF_PLAYER, SystemType.GRAPHICS) == [graphics]


def test_unknown_archetype_has_no_systems():
    manager = ArchetypeManager()
    assert manager.get_systems(ArchetypeID.FIREBALL, SystemType.LOGIC) == []
    assert manager.get_systems(ArchetypeID.FIREBALL, SystemType.GRAPHICS) == []


def test_add_debug_appends_graphics_system():
    manager = ArchetypeManager()
    graphics, debug = object(), object()
    manager.add_archetype_systems(ArchetypeID.STATIC_ENTITY, [], graphics)
    manager.add_debug(ArchetypeID.STATIC_ENTITY, debug)
    assert manager.get_systems(ArchetypeID.STATIC_ENTITY, SystemType.GRAPHICS) == [graphics, debug]
    assert manager.get_systems(ArchetypeID.STATIC_ENTITY, SystemType.LOGIC) == []


def test_add_debug_on_new_archetype_creates_entry():
    manager = ArchetypeManager()
    debug = object()
    manager.add_debug(ArchetypeID.FIREBALL, debug)
    assert manager.get_systems(ArchetypeID.FIREBALL, SystemType.GRAPHICS) == [debug]


def test_returned_lists_are_copies():
    manager = ArchetypeManager()
    logic = [object()]
    manager.add_archetype_systems(ArchetypeID.FIREBALL, logic, object())
    result = manager.get_systems(ArchetypeID.FIREBALL, SystemType.LOGIC)
    result.append(object())
    logic.append(object())
    assert len(manager.get_systems(ArchetypeID.FIREBALL, SystemType.LOGIC)) == 1


def test_add_archetype_systems_replaces_previous():
    manager = ArchetypeManager()
    first, second = object(), object()
    manager.add_archetype_systems(ArchetypeID.STATIC_ENTITY, [first], first)
    manager.add_archetype_systems(ArchetypeID.STATIC_ENTITY, [second], second)
    assert manager.get_systems(ArchetypeID.STATIC_ENTITY, SystemType.LOGIC) == [second]
    assert manager.get_systems(ArchetypeID.STATIC_ENTITY, SystemType.GRAPHICS) == [second]