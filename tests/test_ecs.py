from wavebreak.components import Position, Health, EnemyTag, PlayerTag, WeaponInventory
from wavebreak.player import create_player


def test_query_yields_in_creation_order(world):
    ids = []
    for i in range(20):
        eid = world.create_entity()
        world.add_component(eid, Position(i, 0))
        world.add_component(eid, EnemyTag())
        ids.append(eid)

    assert [eid for eid, _pos, _tag in world.query(Position, EnemyTag)] == ids


def test_query_requires_all_components(world):
    a = world.create_entity()
    world.add_component(a, Position())
    b = world.create_entity()
    world.add_component(b, Position())
    world.add_component(b, Health())

    assert [eid for eid, _pos, _health in world.query(Position, Health)] == [b]
    assert list(world.query(EnemyTag)) == []


def test_destroyed_entities_are_hidden_then_reaped(world):
    eid = world.create_entity()
    world.add_component(eid, Position())
    world.destroy_entity(eid)

    assert not world.is_alive(eid)
    assert list(world.query(Position)) == []
    assert world.process_dead_entities() == 1
    assert world.get_component(eid, Position) is None
    assert world.entity_count() == 0


def test_player_has_tag_and_loadout(world):
    pid = create_player(world, 400.0, 300.0)

    assert world.get_component(pid, PlayerTag) is not None
    assert world.get_component(pid, EnemyTag) is None
    inv = world.get_component(pid, WeaponInventory)
    assert [w.weapon_type for w in inv.weapons] == ['machete', 'pistol']
    assert all(w.owner_id == pid for w in inv.weapons)
