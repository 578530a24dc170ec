"""
Schema view for drf-spectacular that reports generation failures in the API envelope
"""
import logging
from drf_spectacular.views import SpectacularAPIView
from rest_framework import status, permissions
from app.utils.response import api_response

logger = logging.getLogger(__name__)


class CustomSpectacularAPIView(SpectacularAPIView):
    """
    Public schema endpoint; generation failures are logged and returned
    as a SCHEMA_GENERATION_ERROR envelope.
    """
    permission_classes = [permissions.AllowAny]

    def get(self, request, *args, **kwargs):
        try:
            return super().get(request, *args, **kwargs)
        except Exception as e:
            logger.exception(f"Error generating OpenAPI schema: {e}")
            return api_response(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                status="failure",
                data={},
                error_code="SCHEMA_GENERATION_ERROR",
                error_message="Failed to generate API schema. Check server logs for details."
            )
