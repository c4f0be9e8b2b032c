from compilations.handlers.views import (
    AdminCompilationDetailView,
    AdminCompilationListView,
    CompilationDetailView,
    CompilationListView,
)

__all__ = [
    "AdminCompilationDetailView",
    "AdminCompilationListView",
    "CompilationDetailView",
    "CompilationListView",
]
