import sys
import logging

from hash_ring import HashRing, RingConfigurationError
from ring_config import DEFAULT_REPLICA_COUNT, DEFAULT_PREFERENCE_SIZE, LOG_LEVEL
from terminal_colors import TC, configure_logging

logger = logging.getLogger(__name__)

DEFAULT_NODES = ['192.168.1.101', '192.168.1.102', '192.168.1.103', '192.168.1.104']
SAMPLE_KEYS = ["user_session:jane_doe", "user_profile:john_smith", "cart:42", "order:2024-0007"]
EXTRA_NODE = '192.168.1.105'
MOVEMENT_SAMPLE_SIZE = 1000


def parse_args(argv):
    """
    Parses `[replicas] [node ...]`.

    Returns:
        tuple: (replica_count, nodes)
    """
    replica_count = DEFAULT_REPLICA_COUNT
    nodes = list(argv)
    if nodes and nodes[0].lstrip('-').isdigit():
        replica_count = int(nodes.pop(0))
    if any(node.startswith('-') for node in nodes):
        raise ValueError("Invalid arguments.")
    return replica_count, nodes or list(DEFAULT_NODES)


def count_moved_keys(before, after, keys):
    """Counts the keys whose owner differs between two rings."""
    return sum(1 for key in keys if before.get_node(key) != after.get_node(key))


def run_demo(replica_count, nodes, out=None):
    """Builds a ring, prints owners and preference lists, and reports key movement."""
    out = out or sys.stdout
    ring = HashRing(replica_count, nodes=nodes)
    logger.info("Built %r with nodes %s", ring, ring.get_all_physical_nodes())

    for key in SAMPLE_KEYS:
        owner = ring.get_node(key)
        print(f"Key '{key}' is handled by node: {TC.colorize(owner, TC.CYAN)}", file=out)
    print("-" * 30, file=out)

    key = SAMPLE_KEYS[0]
    for node in ring.get_preference_list(key, DEFAULT_PREFERENCE_SIZE):
        print(f"  - {node}", file=out)
    print("-" * 30, file=out)

    keys = [f"key:{i}" for i in range(MOVEMENT_SAMPLE_SIZE)]
    grown = HashRing(replica_count, nodes=nodes)
    grown.add_node(EXTRA_NODE)
    moved = count_moved_keys(ring, grown, keys)
    print(TC.colorize(f"Adding {EXTRA_NODE} moved {moved}/{len(keys)} keys", TC.LIGHT_MAGENTA), file=out)

    grown.remove_node(EXTRA_NODE)
    restored = count_moved_keys(ring, grown, keys)
    print(TC.colorize(f"Removing it again left {restored} keys on a different node", TC.LIGHT_MAGENTA), file=out)
    return moved


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    try:
        replica_count, nodes = parse_args(argv)
        configure_logging(LOG_LEVEL)
        run_demo(replica_count, nodes)
    except (ValueError, RingConfigurationError) as e:
        print(TC.colorize(f"Error: {e}", TC.RED))
        print("Usage: python ring_demo.py [<replicas>] [<node> ...]")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
