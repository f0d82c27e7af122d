import hashlib
import bisect
import logging

from ring_config import DEFAULT_REPLICA_COUNT

logger = logging.getLogger(__name__)


class RingConfigurationError(ValueError):
    """Raised when a ring is built or queried with invalid parameters."""


def md5_hash(key_str):
    """Hashes a string key to a 128-bit integer."""
    return int(hashlib.md5(key_str.encode('utf-8')).hexdigest(), 16)


class HashRing:
    """
    Implements a consistent hash ring with virtual nodes (replicas).

    Every node is placed on the ring `replica_count` times, at the positions
    hash_fn("<node>:<i>"). A key belongs to the node owning the first position
    at or after the key's own hash, wrapping around to the lowest position.

    Replica positions that collide are resolved by the last add_node call, and
    remove_node deletes its positions whoever owns them at that moment.

    The ring does no locking; callers sharing it between threads must guard it.
    """

    def __init__(self, replica_count=DEFAULT_REPLICA_COUNT, hash_fn=md5_hash, nodes=None):
        """
        Initializes the hash ring.

        Args:
            replica_count (int, optional): Number of virtual replicas per node.
                                           Must be at least 1.
            hash_fn (callable, optional): Deterministic function mapping a string
                                          to a number. Defaults to md5_hash.
            nodes (iterable, optional): Nodes to add right away, in order.

        Raises:
            RingConfigurationError: If replica_count or hash_fn is invalid.
        """
        if isinstance(replica_count, bool) or not isinstance(replica_count, int):
            raise RingConfigurationError(f"replica_count must be an integer, got {replica_count!r}")
        if replica_count < 1:
            raise RingConfigurationError(f"replica_count must be at least 1, got {replica_count}")
        if not callable(hash_fn):
            raise RingConfigurationError(f"hash_fn must be callable, got {hash_fn!r}")

        self.replica_count = replica_count
        self.hash_fn = hash_fn
        self._ring = {}  # position -> node
        self._sorted_keys = []  # the same positions, kept sorted for bisect

        if nodes:
            for node in nodes:
                self.add_node(node)

    def _replica_positions(self, node):
        for i in range(self.replica_count):
            yield self.hash_fn(f"{node}:{i}")

    def add_node(self, node):
        """
        Adds a node to the ring by placing each of its replicas.

        A replica landing on a position that is already taken overwrites it.

        Args:
            node: Any identifier with a stable str() form (e.g. '192.168.1.101:8001').
        """
        for position in self._replica_positions(node):
            if position in self._ring:
                current = self._ring[position]
                if current != node:
                    logger.debug("Position %r of %r overwritten by %r", position, current, node)
            else:
                bisect.insort(self._sorted_keys, position)
            self._ring[position] = node
        logger.debug("Added node %r (%d replicas), %d positions on ring",
                     node, self.replica_count, len(self._ring))

    def remove_node(self, node):
        """
        Removes the positions computed for a node's replicas.

        Positions that are not on the ring are skipped, so removing an unknown
        node does nothing.

        Args:
            node: The identifier previously passed to add_node.
        """
        for position in self._replica_positions(node):
            if position not in self._ring:
                continue
            del self._ring[position]
            index = bisect.bisect_left(self._sorted_keys, position)
            del self._sorted_keys[index]
        logger.debug("Removed node %r, %d positions on ring", node, len(self._ring))

    def _successor_index(self, key):
        position = bisect.bisect_left(self._sorted_keys, self.hash_fn(key))
        # Past the highest position: wrap to the start of the ring
        if position == len(self._sorted_keys):
            position = 0
        return position

    def get_node(self, key):
        """
        Finds the node responsible for a given key.

        Args:
            key (str): The key to look up (e.g. a user ID or session ID).

        Returns:
            The owning node, or None when the ring is empty.
        """
        if not self._ring:
            return None
        return self._ring[self._sorted_keys[self._successor_index(key)]]

    def get_preference_list(self, key, n):
        """
        Finds up to n distinct nodes for a key, walking the ring clockwise.

        The first entry is always get_node(key).

        Args:
            key (str): The key to look up.
            n (int): The number of distinct nodes wanted.

        Returns:
            list: At most n distinct nodes, fewer if the ring holds fewer.
        """
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise RingConfigurationError(f"preference list size must be a positive integer, got {n!r}")
        if not self._ring:
            return []

        n = min(n, len(set(self._ring.values())))
        start = self._successor_index(key)
        total = len(self._sorted_keys)

        preference_list = []
        for i in range(total):
            node = self._ring[self._sorted_keys[(start + i) % total]]
            if node not in preference_list:
                preference_list.append(node)
            if len(preference_list) == n:
                break
        return preference_list

    def get_all_physical_nodes(self):
        """Returns the distinct nodes on the ring, in order of their lowest position."""
        nodes = []
        for position in self._sorted_keys:
            node = self._ring[position]
            if node not in nodes:
                nodes.append(node)
        return nodes

    def get_positions(self):
        """Returns a sorted list of (position, node) pairs."""
        return [(position, self._ring[position]) for position in self._sorted_keys]

    def __len__(self):
        return len(self._sorted_keys)

    def __contains__(self, node):
        return node in self._ring.values()

    def __repr__(self):
        return f"HashRing(replica_count={self.replica_count}, positions={len(self)})"
