"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Let the exception handler map domain errors to HTTP responses
- Never contain business logic
"""

from django.core.cache import cache
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from compilations.cache import cache_ttl, compilation_key, invalidate_compilations
from compilations.domain import CompilationId
from compilations.handlers.serializers import (
    CompilationQuerySerializer,
    CompilationSerializer,
    NewCompilationSerializer,
    UpdateCompilationSerializer,
)
from compilations.services import CompilationService
from compilations.stores import DjangoCompilationStore
from events.stores import DjangoEventLookupProvider

# Query string name -> serializer field
_QUERY_PARAMS = {"pinned": "pinned", "from": "offset", "size": "limit"}


def get_compilation_service() -> CompilationService:
    events = DjangoEventLookupProvider()
    return CompilationService(store=DjangoCompilationStore(events), events=events)


class AdminCompilationListView(APIView):
    """Handler for POST /admin/compilations"""

    def post(self, request: Request) -> Response:
        serializer = NewCompilationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        view = get_compilation_service().create_compilation(
            title=data["title"], pinned=data["pinned"], event_ids=data["events"]
        )
        return Response(CompilationSerializer(view).data, status=status.HTTP_201_CREATED)


class AdminCompilationDetailView(APIView):
    """Handler for PATCH and DELETE /admin/compilations/{comp_id}"""

    def patch(self, request: Request, comp_id: str) -> Response:
        serializer = UpdateCompilationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        fields = {name: data[name] for name in ("title", "pinned") if name in data}
        if "events" in data:
            fields["event_ids"] = data["events"]
        view = get_compilation_service().update_compilation(comp_id, **fields)
        invalidate_compilations([view.id.value])
        return Response(CompilationSerializer(view).data)

    def delete(self, request: Request, comp_id: str) -> Response:
        get_compilation_service().delete_compilation(comp_id)
        invalidate_compilations([CompilationId.from_string(comp_id).value])
        return Response(status=status.HTTP_204_NO_CONTENT)


class CompilationListView(APIView):
    """Handler for GET /compilations"""

    def get(self, request: Request) -> Response:
        params = {
            field: request.query_params[name]
            for name, field in _QUERY_PARAMS.items()
            if name in request.query_params
        }
        serializer = CompilationQuerySerializer(data=params)
        serializer.is_valid(raise_exception=True)
        query = serializer.validated_data
        views = get_compilation_service().list_compilations(
            pinned=query["pinned"], offset=query["offset"], limit=query["limit"]
        )
        return Response(CompilationSerializer(views, many=True).data)


class CompilationDetailView(APIView):
    """Handler for GET /compilations/{comp_id}"""

    def get(self, request: Request, comp_id: str) -> Response:
        try:
            key = compilation_key(CompilationId.from_string(comp_id).value)
        except ValueError:
            key = None
        cached = cache.get(key) if key else None
        if cached is not None:
            return Response(cached)
        view = get_compilation_service().get_compilation(comp_id)
        data = CompilationSerializer(view).data
        cache.set(compilation_key(view.id.value), data, cache_ttl())
        return Response(data)
