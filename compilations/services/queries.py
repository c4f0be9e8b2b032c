"""Read contracts for compilations."""

from compilations.domain import CompilationId, CompilationView, PageRequest
from compilations.domain.errors import CompilationNotFoundError
from compilations.services.aggregator import CompilationAggregator
from compilations.stores import CompilationStore


class CompilationQueries:
    """Query side of the compilation service."""

    def __init__(self, store: CompilationStore, aggregator: CompilationAggregator) -> None:
        self._store = store
        self._aggregator = aggregator

    def get(self, compilation_id: CompilationId) -> CompilationView:
        stored = self._store.get(compilation_id)
        if stored is None:
            raise CompilationNotFoundError(compilation_id.value)
        return self._aggregator.build(stored)

    def list(self, pinned: bool | None, page: PageRequest) -> list[CompilationView]:
        """Return one page of compilations in id order.

        A page past the end is empty, not an error.
        """
        stored = self._store.list(pinned, page.offset, page.limit)
        return self._aggregator.build_many(stored)
