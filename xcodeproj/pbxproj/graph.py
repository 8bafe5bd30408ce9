# Object graph.
#
# The graph owns every object of a project keyed by its identifier. Objects never
# hold each other directly: they keep identifier strings and look them up here on
# demand. Objects that need lookups of their own get a WeakHandle, which does not
# keep the graph alive and answers None once the graph is gone.

import logging
import uuid
from contextlib import contextmanager
from threading import RLock
from typing import (
    TYPE_CHECKING,
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    Type,
    TypeVar,
)
from weakref import ReferenceType, ref

from xcodeproj.config import DEFAULT_CONFIG, ParserConfig
from xcodeproj.errors import DuplicateIdentifierError

if TYPE_CHECKING:
    from xcodeproj.pbxproj.model import PBXObject

logger = logging.getLogger(__name__)

ObjectT = TypeVar("ObjectT", bound="PBXObject")


class XcodeID(str):
    pass


def generate_id(key: Optional[str] = None) -> XcodeID:
    """24 character uppercase hex identifier; stable for a given key, random otherwise."""
    if key is None:
        return XcodeID(uuid.uuid4().hex.upper()[:24])
    return XcodeID(uuid.uuid5(uuid.NAMESPACE_X500, key).hex.upper()[:24])


class ObjectGraph:
    """All objects of one project, keyed by identifier, in insertion order.

    Mutations run under the graph lock; reads through a WeakHandle take the same
    lock, so a lookup never observes a half-applied mutation.
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self._objects: Dict[str, "PBXObject"] = {}
        self._lock = RLock()

    def __len__(self) -> int:
        return len(self._objects)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._objects

    def __iter__(self) -> Iterator[Tuple[str, "PBXObject"]]:
        return self.items()

    def items(self) -> Iterator[Tuple[str, "PBXObject"]]:
        with self._lock:
            snapshot = list(self._objects.items())
        return iter(snapshot)

    def ids(self) -> List[str]:
        with self._lock:
            return list(self._objects)

    @contextmanager
    def mutation(self) -> Iterator["ObjectGraph"]:
        """Hold the graph exclusively for a sequence of edits."""
        with self._lock:
            yield self

    def handle(self) -> "WeakHandle":
        return WeakHandle(self)

    def insert(self, identifier: str, obj: "PBXObject") -> None:
        with self._lock:
            if identifier in self._objects and not self.config.allow_duplicate_ids:
                raise DuplicateIdentifierError(identifier)
            obj.objects = self.handle()
            self._objects[identifier] = obj

    def replace(self, identifier: str, obj: "PBXObject") -> Optional["PBXObject"]:
        """Insert obj, returning whatever object held the identifier before."""
        with self._lock:
            old = self._objects.get(identifier)
            obj.objects = self.handle()
            self._objects[identifier] = obj
            return old

    def get(self, identifier: str) -> Optional["PBXObject"]:
        with self._lock:
            return self._objects.get(identifier)

    def get_mut(self, identifier: str) -> Optional["PBXObject"]:
        # Objects are mutable in place; callers editing them should hold mutation().
        return self.get(identifier)

    def get_as(self, identifier: str, cls: Type[ObjectT]) -> Optional[ObjectT]:
        obj = self.get(identifier)
        if isinstance(obj, cls):
            return obj
        return None

    def remove(self, identifier: str) -> Optional["PBXObject"]:
        with self._lock:
            return self._objects.pop(identifier, None)

    def clear(self) -> None:
        with self._lock:
            self._objects.clear()

    def identifier_of(self, obj: "PBXObject") -> Optional[str]:
        with self._lock:
            for identifier, candidate in self._objects.items():
                if candidate is obj:
                    return identifier
        return None

    def new_id(self) -> XcodeID:
        with self._lock:
            while True:
                identifier = generate_id()
                if identifier not in self._objects:
                    return identifier

    def resolve(self, identifiers: Iterable[str]) -> List["PBXObject"]:
        """Look up each identifier in order, skipping the ones that do not exist."""
        resolved = []
        with self._lock:
            for identifier in identifiers:
                obj = self._objects.get(identifier)
                if obj is None:
                    logger.debug("skipping dangling reference %s", identifier)
                    continue
                resolved.append(obj)
        return resolved

    def resolve_as(self, identifiers: Iterable[str], cls: Type[ObjectT]) -> List[ObjectT]:
        return [obj for obj in self.resolve(identifiers) if isinstance(obj, cls)]

    def of_type(self, cls: Type[ObjectT]) -> List[Tuple[str, ObjectT]]:
        return [(i, obj) for i, obj in self.items() if isinstance(obj, cls)]


class WeakHandle:
    """Non-owning read access to an ObjectGraph."""

    def __init__(self, graph: Optional[ObjectGraph] = None):
        self._ref: Optional[ReferenceType] = ref(graph) if graph is not None else None

    @property
    def graph(self) -> Optional[ObjectGraph]:
        if self._ref is None:
            return None
        return self._ref()

    @property
    def alive(self) -> bool:
        return self.graph is not None

    def clone(self) -> "WeakHandle":
        return WeakHandle(self.graph)

    def get(self, identifier: Optional[str]) -> Optional["PBXObject"]:
        graph = self.graph
        if graph is None or identifier is None:
            return None
        return graph.get(identifier)

    def get_as(self, identifier: Optional[str], cls: Type[ObjectT]) -> Optional[ObjectT]:
        obj = self.get(identifier)
        if isinstance(obj, cls):
            return obj
        return None

    def resolve(self, identifiers: Iterable[str]) -> List["PBXObject"]:
        graph = self.graph
        if graph is None:
            return []
        return graph.resolve(identifiers)

    def resolve_as(self, identifiers: Iterable[str], cls: Type[ObjectT]) -> List[ObjectT]:
        graph = self.graph
        if graph is None:
            return []
        return graph.resolve_as(identifiers, cls)

    def __repr__(self) -> str:
        state = "alive" if self.alive else "dead"
        return f"WeakHandle({state})"
