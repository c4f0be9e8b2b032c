"""Serializers for request parsing and domain-to-response transformation."""

from rest_framework import serializers

from compilations.domain import TITLE_MAX_LENGTH


class NewCompilationSerializer(serializers.Serializer):
    """Request body for POST /admin/compilations."""

    title = serializers.CharField(max_length=TITLE_MAX_LENGTH)
    pinned = serializers.BooleanField(required=False, default=False)
    events = serializers.ListField(
        child=serializers.IntegerField(min_value=1), required=False, default=list
    )


class UpdateCompilationSerializer(serializers.Serializer):
    """Request body for PATCH; absent keys stay absent from validated_data."""

    title = serializers.CharField(max_length=TITLE_MAX_LENGTH, required=False)
    pinned = serializers.BooleanField(required=False)
    events = serializers.ListField(
        child=serializers.IntegerField(min_value=1), required=False
    )


class CompilationQuerySerializer(serializers.Serializer):
    """Query parameters for GET /compilations."""

    pinned = serializers.BooleanField(required=False, allow_null=True, default=None)
    offset = serializers.IntegerField(required=False, default=0, min_value=0)
    limit = serializers.IntegerField(required=False, default=10, min_value=1)


class CategorySerializer(serializers.Serializer):
    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()


class EventShortSerializer(serializers.Serializer):
    """Serializer for EventShort domain model."""

    id = serializers.IntegerField(source="id.value")
    title = serializers.CharField()
    annotation = serializers.CharField()
    category = CategorySerializer()
    paid = serializers.BooleanField()
    eventDate = serializers.DateTimeField(source="event_date", format="%Y-%m-%d %H:%M:%S")
    confirmedRequests = serializers.IntegerField(source="confirmed_requests")


class CompilationSerializer(serializers.Serializer):
    """Serializer for CompilationView domain model."""

    id = serializers.IntegerField(source="id.value")
    title = serializers.CharField()
    pinned = serializers.BooleanField()
    events = EventShortSerializer(many=True)
