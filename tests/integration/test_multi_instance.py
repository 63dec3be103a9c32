"""Integration tests: several simulation instances minting entity ids.

Why these tests exist:
- Instances that share one identifier space must never collide
- Ids must route back to the instance that minted them
"""

from itertools import islice

from ecsuid import JS_SAFE_SPACE, SaltRegistry, UIDGenerator, is_salted_by, salt_of


def test_instances_from_one_registry_never_collide():
    registry = SaltRegistry()
    instances = [registry.next_generator() for _ in range(50)]

    minted: dict[int, int] = {}
    for _ in range(100):
        for instance in instances:
            uid = instance.next()
            assert uid not in minted, "INVARIANT: identifiers must be unique"
            minted[uid] = instance.salt

    assert len(minted) == 5000
    for uid, salt in minted.items():
        assert salt_of(uid) == salt


def test_disjoint_process_salt_ranges():
    """Separate processes stay disjoint when launched with distinct salts."""
    server = UIDGenerator(0)
    clients = [UIDGenerator(salt) for salt in (101, 102, 103)]

    seen: set[int] = set(islice(server, 300))
    for client in clients:
        ids = set(islice(client, 300))
        assert seen.isdisjoint(ids)
        seen |= ids

    assert len(seen) == 1200


def test_js_safe_space_ids_survive_float_conversion():
    registry = SaltRegistry(JS_SAFE_SPACE)
    registry.next_salt()
    generator = registry.next_generator()

    for uid in islice(generator, 100):
        assert int(float(uid)) == uid
        assert is_salted_by(uid, 1, JS_SAFE_SPACE.max_salts)
