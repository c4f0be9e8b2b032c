from compilations.services.aggregator import CompilationAggregator
from compilations.services.compilation_service import CompilationService

__all__ = ["CompilationAggregator", "CompilationService"]
