"""Several simulation instances minting entity ids in one process.

Demonstrates:
- Drawing a salt per instance from a registry
- Routing ids back to the instance that created them
- Opt-in wraparound logging
"""

import logging
from itertools import islice

from ecsuid import LoggingObserver, SaltRegistry, SaltSpace, salt_of


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    registry = SaltRegistry()
    instances = [registry.next_generator() for _ in range(3)]

    for generator in instances:
        print(f"instance {generator.salt}: {list(islice(generator, 3))}")

    uid = instances[2].next()
    print(f"id {uid} belongs to instance {salt_of(uid)}")

    # Tiny space so wraparound shows up after two ids
    demo = SaltRegistry(SaltSpace(max_salts=10, max_safe_value=39), observer=LoggingObserver())
    generator = demo.next_generator()
    print([generator.next() for _ in range(3)])


if __name__ == "__main__":
    main()
