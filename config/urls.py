from django.contrib import admin
from django.urls import path, include
from rest_framework import permissions

from drf_spectacular.views import (
    SpectacularSwaggerView,
    SpectacularRedocView,
)
from config.schema_view import CustomSpectacularAPIView

# ================================
# URL PATTERNS
# ================================
urlpatterns = [

    # -------------------------
    # Django Admin
    # -------------------------
    path("admin/", admin.site.urls),

    # -------------------------
    # Platform services
    # Base: /api/v1/
    # -------------------------
    path("api/v1/", include("app.platform.plugins.urls")),

    # -------------------------
    # OpenAPI / Swagger / Redoc
    # -------------------------
    path("api/schema/", CustomSpectacularAPIView.as_view(), name="schema"),
    path(
        "api/schema/swagger-ui/",
        SpectacularSwaggerView.as_view(url_name="schema", permission_classes=[permissions.AllowAny]),
        name="swagger-ui",
    ),
    path(
        "api/schema/redoc/",
        SpectacularRedocView.as_view(url_name="schema", permission_classes=[permissions.AllowAny]),
        name="redoc",
    ),
]
