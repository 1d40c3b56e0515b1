"""
ECS World
==========
Integer entity ids with one component store per component type.

Stores are insertion-ordered dicts, so queries walk entities in creation
order. Collision checks that take the "first" enemy depend on this.
"""

from collections import defaultdict
from typing import Any, DefaultDict, Dict, Iterator, Optional, Tuple, Type, TypeVar

C = TypeVar('C')

Store = Dict[int, Any]


class World:
    """Owns every entity id and component in a single game session."""

    def __init__(self):
        self._next_id = 0
        self._alive: Dict[int, None] = {}
        self._doomed: Dict[int, None] = {}
        self._stores: DefaultDict[Type, Store] = defaultdict(dict)

    # -------------------------------------------------------------------------
    # Entities
    # -------------------------------------------------------------------------

    def create_entity(self) -> int:
        entity_id = self._next_id
        self._next_id += 1
        self._alive[entity_id] = None
        return entity_id

    def destroy_entity(self, entity_id: int) -> None:
        """Schedule removal. The entity drops out of queries immediately."""
        if entity_id in self._alive:
            self._doomed[entity_id] = None

    def process_dead_entities(self) -> int:
        """Reap scheduled entities and their components. Returns how many."""
        doomed = [eid for eid in self._doomed if eid in self._alive]
        for entity_id in doomed:
            del self._alive[entity_id]
            for store in self._stores.values():
                store.pop(entity_id, None)
        self._doomed.clear()
        return len(doomed)

    def is_alive(self, entity_id: int) -> bool:
        return entity_id in self._alive and entity_id not in self._doomed

    def entity_count(self) -> int:
        return sum(1 for eid in self._alive if eid not in self._doomed)

    # -------------------------------------------------------------------------
    # Components
    # -------------------------------------------------------------------------

    def add_component(self, entity_id: int, component: Any) -> None:
        """Attach a component, replacing any existing one of the same type."""
        self._stores[type(component)][entity_id] = component

    def get_component(self, entity_id: int, component_type: Type[C]) -> Optional[C]:
        store = self._stores.get(component_type)
        return store.get(entity_id) if store is not None else None

    def query(self, *component_types: Type) -> Iterator[Tuple[Any, ...]]:
        """
        Yield (entity_id, comp_a, comp_b, ...) for live entities having
        every requested component, in creation order.

        The id list is copied up front so systems may create or destroy
        entities while iterating.
        """
        stores = [self._stores.get(t) for t in component_types]
        if not stores or any(store is None for store in stores):
            return

        primary = min(stores, key=len) if len(stores) > 1 else stores[0]
        for entity_id in [eid for eid in self._alive if eid in primary]:
            if entity_id in self._doomed:
                continue
            if all(entity_id in store for store in stores):
                yield (entity_id,) + tuple(store[entity_id] for store in stores)
