"""Serializers for parsing week view requests and rendering domain models."""

from rest_framework import serializers

from weekview.domain.models import CalendarEvent
from weekview.domain.value_objects import Color


class ColorSerializer(serializers.Serializer):
    """Serializer for Color value object."""

    primary = serializers.CharField(allow_blank=True)
    secondary = serializers.CharField(allow_blank=True)

    def to_internal_value(self, data):
        values = super().to_internal_value(data)
        return Color(**values)


class EventIdField(serializers.Field):
    """Caller-defined event id, either a string or an integer."""

    default_error_messages = {"invalid": "Event id must be a string or an integer."}

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, (str, int)):
            self.fail("invalid")
        return data

    def to_representation(self, value):
        return value


class CalendarEventSerializer(serializers.Serializer):
    """Serializer for CalendarEvent domain model."""

    id = EventIdField(required=False, allow_null=True, default=None)
    start = serializers.DateTimeField()
    end = serializers.DateTimeField(required=False, allow_null=True, default=None)
    title = serializers.CharField(required=False, allow_blank=True, default="")
    color = ColorSerializer(required=False, default=Color.blank)
    all_day = serializers.BooleanField(required=False, default=False)

    def to_internal_value(self, data):
        values = super().to_internal_value(data)
        return CalendarEvent(**values)


class WeekHeaderQuerySerializer(serializers.Serializer):
    """Query parameters of GET /api/week-view/header."""

    view_date = serializers.CharField()
    week_starts_on = serializers.IntegerField(required=False, min_value=0, max_value=6)


class WeekLayoutRequestSerializer(serializers.Serializer):
    """Body of POST /api/week-view/layout."""

    view_date = serializers.CharField()
    week_starts_on = serializers.IntegerField(required=False, min_value=0, max_value=6)
    events = CalendarEventSerializer(many=True)


class WeekDaySerializer(serializers.Serializer):
    """Serializer for WeekDay domain model."""

    date = serializers.DateTimeField()
    is_past = serializers.BooleanField()
    is_today = serializers.BooleanField()
    is_future = serializers.BooleanField()
    is_weekend = serializers.BooleanField()


class PositionedEventSerializer(serializers.Serializer):
    """Serializer for PositionedEvent domain model."""

    event = CalendarEventSerializer()
    offset = serializers.IntegerField()
    span = serializers.IntegerField()
    extends_left = serializers.BooleanField()
    extends_right = serializers.BooleanField()


class WeekRowSerializer(serializers.Serializer):
    """Serializer for WeekRow domain model."""

    row = PositionedEventSerializer(many=True)
