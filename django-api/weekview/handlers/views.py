"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.conf import settings
from loguru import logger
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from weekview.domain.errors import DomainError, ErrorCode
from weekview.handlers.serializers import (
    WeekDaySerializer,
    WeekHeaderQuerySerializer,
    WeekLayoutRequestSerializer,
    WeekRowSerializer,
)
from weekview.services import WeekViewService


def get_week_view_service() -> WeekViewService:
    config = settings.WEEKVIEW
    return WeekViewService(
        week_starts_on=config["WEEK_STARTS_ON"],
        weekend_days=config["WEEKEND_DAYS"],
    )


def invalid_request(errors) -> Response:
    return Response(
        {
            "error": {
                "code": ErrorCode.INVALID_REQUEST.value,
                "message": "Invalid request",
                "fields": errors,
            }
        },
        status=status.HTTP_400_BAD_REQUEST,
    )


def domain_error(error: DomainError) -> Response:
    logger.warning(f"[WEEK_VIEW] Rejected request: {error}")
    return Response(
        {"error": {"code": error.code.value, "message": error.message}},
        status=status.HTTP_400_BAD_REQUEST,
    )


class WeekHeaderView(APIView):
    """Handler for GET /api/week-view/header"""

    def get(self, request: Request) -> Response:
        query = WeekHeaderQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return invalid_request(query.errors)

        try:
            days = get_week_view_service().get_header(**query.validated_data)
        except DomainError as error:
            return domain_error(error)
        return Response({"days": WeekDaySerializer(days, many=True).data})


class WeekLayoutView(APIView):
    """Handler for POST /api/week-view/layout"""

    def post(self, request: Request) -> Response:
        body = WeekLayoutRequestSerializer(data=request.data)
        if not body.is_valid():
            return invalid_request(body.errors)

        try:
            rows = get_week_view_service().get_layout(**body.validated_data)
        except DomainError as error:
            return domain_error(error)
        return Response({"rows": WeekRowSerializer(rows, many=True).data})
