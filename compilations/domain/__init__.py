from compilations.domain.models import (
    CompilationPatch,
    CompilationView,
    NewCompilation,
    StoredCompilation,
)
from compilations.domain.value_objects import (
    TITLE_MAX_LENGTH,
    UNSET,
    CompilationId,
    PageRequest,
    Title,
    Unset,
)

__all__ = [
    "CompilationPatch",
    "CompilationView",
    "NewCompilation",
    "StoredCompilation",
    "CompilationId",
    "PageRequest",
    "Title",
    "TITLE_MAX_LENGTH",
    "UNSET",
    "Unset",
]
