# backend/urls.py
"""
PROJECT URLS

- /api/...       cashier API (products, categories, checkout, reports)
- /incoming/...  provider webhooks (Tspay deposit callback)
- /health/       liveness + DB ping (also at /api/health/)

Security hardening:
- Make Django admin path configurable via env var (ADMIN_PATH)
  to reduce bot scanning/noise and narrow attack surface.
"""

from __future__ import annotations

from django.conf import settings
from django.contrib import admin
from django.db import DatabaseError, connections
from django.urls import include, path
from django.views.generic import RedirectView
from drf_spectacular.utils import extend_schema
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny

from backend.api import api_response, failed_response

_ENVELOPE_SCHEMA = {
    "type": "object",
    "properties": {
        "status": {"type": "string"},
        "message": {"type": "string"},
        "data": {"type": "object"},
    },
}


# ------------------ API ROOT (PUBLIC) ------------------
@extend_schema(responses={200: _ENVELOPE_SCHEMA})
@api_view(["GET"])
@permission_classes([AllowAny])
def api_root(request):
    return api_response(
        message="Kasir API is running",
        data={
            "docs": {
                "swagger": "/api/docs/",
                "schema": "/api/schema/",
            },
            "modules": {
                "category": "/api/category/",
                "product": "/api/product/",
                "checkout": "/api/checkout/",
                "report_today": "/api/report/hari-ini/",
                "report_range": "/api/report/?start_date=YYYY-MM-DD&end_date=YYYY-MM-DD",
                "deposit_callback": "/incoming/deposit_callback",
            },
        },
    )


# ------------------ HEALTH CHECK (PUBLIC) ------------------
@extend_schema(responses={200: _ENVELOPE_SCHEMA, 503: _ENVELOPE_SCHEMA})
@api_view(["GET"])
@permission_classes([AllowAny])
def health_check(request):
    """
    Minimal operational endpoint:
    - Confirms app is responding
    - Confirms DB connection + simple query works
    """
    try:
        conn = connections["default"]
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1;")
            cursor.fetchone()
    except DatabaseError as e:
        return failed_response(message=f"Database unavailable: {e}", http_status=503)

    return api_response(message="API Running")


# ------------------ ADMIN PATH (HARDENED) ------------------
# Keep the trailing slash; do NOT expose a custom path in public docs.
ADMIN_PATH = getattr(settings, "ADMIN_PATH", "admin/")
if not ADMIN_PATH.endswith("/"):
    ADMIN_PATH = f"{ADMIN_PATH}/"


# ------------------ API ROUTES (ALL UNDER /api/) ------------------
api_urlpatterns = [
    path("", api_root, name="api-root"),
    path("health/", health_check, name="api-health-check"),
    # OpenAPI / Swagger
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path("docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    # App modules
    path("", include("products.urls")),
    path("", include("sales.urls")),
]

urlpatterns = [
    path(ADMIN_PATH, admin.site.urls),
    # Root convenience: visiting / takes you to Swagger docs
    path("", RedirectView.as_view(url="/api/docs/", permanent=False), name="root"),
    path("health/", health_check, name="health-check"),
    path("api/", include(api_urlpatterns)),
    path("incoming/", include("incoming.urls")),
]
