"""Domain models for compilations.

StoredCompilation is the persisted shape (bare event ids); CompilationView is
the read projection with every member resolved to an EventShort.
"""

from dataclasses import dataclass, field

from compilations.domain.value_objects import UNSET, CompilationId, Unset
from events.domain import EventId, EventShort


@dataclass(frozen=True)
class StoredCompilation:
    """Compilation record as held by the store."""

    id: CompilationId
    title: str
    pinned: bool
    event_ids: frozenset[EventId] = frozenset()


@dataclass(frozen=True)
class CompilationView:
    """Compilation with resolved events, ordered by event id."""

    id: CompilationId
    title: str
    pinned: bool
    events: tuple[EventShort, ...] = ()


@dataclass(frozen=True)
class NewCompilation:
    """Input for creating a compilation."""

    title: str
    pinned: bool = False
    event_ids: frozenset[EventId] = field(default_factory=frozenset)


@dataclass(frozen=True)
class CompilationPatch:
    """Partial update where each field is either UNSET or a replacement value.

    A present ``event_ids`` replaces the whole membership set, an empty
    frozenset included.
    """

    title: str | Unset = UNSET
    pinned: bool | Unset = UNSET
    event_ids: frozenset[EventId] | Unset = UNSET

    @property
    def touches_fields(self) -> bool:
        return self.title is not UNSET or self.pinned is not UNSET

    @property
    def touches_membership(self) -> bool:
        return self.event_ids is not UNSET
