"""Base class for named scene objects with unique ids."""

from __future__ import annotations

import copy
import itertools
import threading

import numpy as np


class Node:
    """A named object that receives a process-wide unique id on creation."""

    default_name = "Node"

    _id_counter = itertools.count()
    _id_lock = threading.Lock()

    def __init__(self, name: str = "") -> None:
        self._global_node_id = self._next_id()
        self.name = name or type(self).default_name

    @classmethod
    def _next_id(cls) -> int:
        with Node._id_lock:
            return next(Node._id_counter)

    @property
    def global_node_id(self) -> int:
        """The node's unique id."""
        return self._global_node_id

    def clone(self) -> Node:
        """Return a copy of this node with a fresh unique id."""
        duplicate = copy.copy(self)
        for key, value in vars(duplicate).items():
            if isinstance(value, np.ndarray):
                setattr(duplicate, key, value.copy())
        duplicate._global_node_id = self._next_id()
        return duplicate

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self._global_node_id < other._global_node_id

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, id={self._global_node_id})"