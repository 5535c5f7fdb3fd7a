# sales/views/reports.py

"""
PATH: sales/views/reports.py

SALES REPORTS

- GET /api/report/hari-ini/                                   today (TIME_ZONE)
- GET /api/report/?start_date=YYYY-MM-DD&end_date=YYYY-MM-DD  inclusive range

Both count only non-deleted transactions.
"""

from __future__ import annotations

from django.db import DatabaseError
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, OpenApiTypes, extend_schema
from rest_framework import status
from rest_framework.views import APIView

from backend.api import api_response, failed_response
from sales.serializers import ReportRangeQuerySerializer, SalesReportSerializer
from sales.services.report_service import (
    get_daily_sales_report,
    get_sales_report_for_dates,
)


class DailySalesReportView(APIView):
    @extend_schema(
        tags=["Report"],
        responses={200: SalesReportSerializer},
        description="Today's revenue, transaction count and top-selling product.",
    )
    def get(self, request):
        try:
            report = get_daily_sales_report()
        except DatabaseError as exc:
            return failed_response(
                message=f"Failed to fetch daily sales report: {exc}",
                http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return api_response(message="Daily sales report retrieved successfully", data=report)


class SalesReportView(APIView):
    @extend_schema(
        tags=["Report"],
        parameters=[
            OpenApiParameter(
                name="start_date",
                type=OpenApiTypes.DATE,
                required=True,
                description="Start date in YYYY-MM-DD (from 00:00:00).",
            ),
            OpenApiParameter(
                name="end_date",
                type=OpenApiTypes.DATE,
                required=True,
                description="End date in YYYY-MM-DD (until 23:59:59).",
            ),
        ],
        responses={
            200: SalesReportSerializer,
            400: OpenApiResponse(description="Missing or invalid dates"),
        },
        description="Revenue, transaction count and top-selling product for a date range.",
    )
    def get(self, request):
        start_raw = (request.query_params.get("start_date") or "").strip()
        end_raw = (request.query_params.get("end_date") or "").strip()

        if not start_raw or not end_raw:
            return failed_response(
                message="start_date and end_date query parameters are required",
                http_status=status.HTTP_400_BAD_REQUEST,
            )

        query = ReportRangeQuerySerializer(data={"start_date": start_raw, "end_date": end_raw})
        if not query.is_valid():
            return failed_response(
                message="Invalid date range. Use YYYY-MM-DD and end_date >= start_date.",
                http_status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            report = get_sales_report_for_dates(
                query.validated_data["start_date"],
                query.validated_data["end_date"],
            )
        except DatabaseError as exc:
            return failed_response(
                message=f"Failed to fetch sales report: {exc}",
                http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return api_response(message="Sales report retrieved successfully", data=report)
