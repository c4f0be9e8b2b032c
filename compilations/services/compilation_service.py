"""Compilation service - the entry point handlers call.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from collections.abc import Iterable

from compilations.domain import (
    UNSET,
    CompilationId,
    CompilationPatch,
    CompilationView,
    NewCompilation,
    PageRequest,
    Unset,
)
from compilations.domain.errors import (
    InvalidCompilationIdError,
    InvalidPaginationError,
    InvalidPinnedError,
    UnknownEventsError,
)
from compilations.services.aggregator import CompilationAggregator
from compilations.services.commands import CompilationCommands
from compilations.services.queries import CompilationQueries
from compilations.stores import CompilationStore
from events.domain import EventId
from events.stores import EventLookupProvider


def _parse_id(compilation_id: int | str) -> CompilationId:
    try:
        return CompilationId.from_string(str(compilation_id))
    except (TypeError, ValueError) as exc:
        raise InvalidCompilationIdError() from exc


def _validated_pinned(pinned: object) -> bool | Unset:
    if pinned is UNSET or isinstance(pinned, bool):
        return pinned
    raise InvalidPinnedError()


def _parse_event_ids(event_ids: Iterable[int | EventId]) -> frozenset[EventId]:
    parsed = set()
    invalid = []
    for raw in event_ids:
        if isinstance(raw, EventId):
            parsed.add(raw)
            continue
        try:
            parsed.add(EventId(int(raw)))
        except (TypeError, ValueError):
            invalid.append(raw)
    if invalid:
        raise UnknownEventsError(invalid)
    return frozenset(parsed)


class CompilationService:
    """Service for compilation curation and browsing."""

    def __init__(self, store: CompilationStore, events: EventLookupProvider) -> None:
        aggregator = CompilationAggregator(events)
        self._commands = CompilationCommands(store, aggregator)
        self._queries = CompilationQueries(store, aggregator)

    def create_compilation(
        self,
        title: str,
        pinned: bool | None = None,
        event_ids: Iterable[int | EventId] | None = None,
    ) -> CompilationView:
        """Create a compilation. Duplicate event ids collapse to one member.

        Raises:
            InvalidPinnedError: If pinned is not a boolean.
            InvalidTitleError: If the title is blank or too long.
            UnknownEventsError: If any event id does not exist.
        """
        new = NewCompilation(
            title=title,
            pinned=False if pinned is None else _validated_pinned(pinned),
            event_ids=_parse_event_ids(event_ids or ()),
        )
        return self._commands.create(new)

    def update_compilation(
        self,
        compilation_id: int | str,
        title: str | Unset = UNSET,
        pinned: bool | Unset = UNSET,
        event_ids: Iterable[int | EventId] | Unset = UNSET,
    ) -> CompilationView:
        """Update only the supplied fields of a compilation.

        Raises:
            InvalidCompilationIdError: If the compilation_id is malformed.
            CompilationNotFoundError: If the compilation does not exist.
            InvalidPinnedError: If a supplied pinned is not a boolean.
            InvalidTitleError: If a supplied title is blank or too long.
            UnknownEventsError: If any supplied event id does not exist.
        """
        patch = CompilationPatch(
            title=title,
            pinned=_validated_pinned(pinned),
            event_ids=UNSET if event_ids is UNSET else _parse_event_ids(event_ids),
        )
        return self._commands.update(_parse_id(compilation_id), patch)

    def delete_compilation(self, compilation_id: int | str) -> None:
        """Delete a compilation; deleting twice fails.

        Raises:
            InvalidCompilationIdError: If the compilation_id is malformed.
            CompilationNotFoundError: If the compilation does not exist.
        """
        self._commands.delete(_parse_id(compilation_id))

    def get_compilation(self, compilation_id: int | str) -> CompilationView:
        """Return a compilation by ID.

        Raises:
            InvalidCompilationIdError: If the compilation_id is malformed.
            CompilationNotFoundError: If the compilation does not exist.
        """
        return self._queries.get(_parse_id(compilation_id))

    def list_compilations(
        self, pinned: bool | None = None, offset: int = 0, limit: int = 10
    ) -> list[CompilationView]:
        """Return a page of compilations ordered by id.

        Raises:
            InvalidPaginationError: If offset is negative or limit not positive.
        """
        try:
            page = PageRequest(offset=offset, limit=limit)
        except ValueError as exc:
            raise InvalidPaginationError(str(exc)) from exc
        return self._queries.list(pinned, page)
