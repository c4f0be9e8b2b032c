"""Create, update and delete contracts for compilations."""

import logging

from compilations.domain import (
    UNSET,
    CompilationId,
    CompilationPatch,
    CompilationView,
    NewCompilation,
    Title,
)
from compilations.domain.errors import CompilationNotFoundError, InvalidTitleError
from compilations.services.aggregator import CompilationAggregator
from compilations.stores import CompilationStore

logger = logging.getLogger(__name__)


def _validated_title(title: str | None) -> str:
    try:
        return Title(title or "").value
    except ValueError as exc:
        raise InvalidTitleError(str(exc)) from exc


class CompilationCommands:
    """Mutation side of the compilation service."""

    def __init__(self, store: CompilationStore, aggregator: CompilationAggregator) -> None:
        self._store = store
        self._aggregator = aggregator

    def create(self, new: NewCompilation) -> CompilationView:
        """Persist a compilation and return its aggregated view.

        Raises:
            InvalidTitleError: If the title is blank or too long.
            UnknownEventsError: If any event id does not exist.
        """
        title = _validated_title(new.title)
        with self._store.atomic():
            compilation_id = self._store.create(title, new.pinned, new.event_ids)
            view = self._view(compilation_id)
        logger.info(
            "Created compilation %s with %d events",
            compilation_id.value,
            len(new.event_ids),
        )
        return view

    def update(
        self, compilation_id: CompilationId, patch: CompilationPatch
    ) -> CompilationView:
        """Apply a partial update; present events replace the set wholesale.

        The whole patch commits or nothing does.

        Raises:
            CompilationNotFoundError: If the compilation does not exist.
            InvalidTitleError: If a supplied title is blank or too long.
            UnknownEventsError: If any supplied event id does not exist.
        """
        title = UNSET if patch.title is UNSET else _validated_title(patch.title)
        with self._store.atomic():
            if not self._store.exists(compilation_id):
                raise CompilationNotFoundError(compilation_id.value)
            if patch.touches_membership:
                self._store.replace_membership(compilation_id, patch.event_ids)
            if patch.touches_fields:
                self._store.update_fields(compilation_id, title=title, pinned=patch.pinned)
            view = self._view(compilation_id)
        logger.info("Updated compilation %s", compilation_id.value)
        return view

    def delete(self, compilation_id: CompilationId) -> None:
        """Remove a compilation.

        Raises:
            CompilationNotFoundError: If the compilation does not exist.
        """
        if not self._store.delete(compilation_id):
            raise CompilationNotFoundError(compilation_id.value)
        logger.info("Deleted compilation %s", compilation_id.value)

    def _view(self, compilation_id: CompilationId) -> CompilationView:
        stored = self._store.get(compilation_id)
        if stored is None:
            raise CompilationNotFoundError(compilation_id.value)
        return self._aggregator.build(stored)
