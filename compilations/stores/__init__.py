from compilations.stores.django_store import DjangoCompilationStore
from compilations.stores.interfaces import CompilationStore

__all__ = ["CompilationStore", "DjangoCompilationStore"]
