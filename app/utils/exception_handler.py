import logging
from django.http import Http404
from rest_framework.views import exception_handler
from rest_framework.exceptions import (
    APIException,
    ValidationError,
    NotAuthenticated,
    AuthenticationFailed,
    PermissionDenied,
    NotFound,
)
from rest_framework import status

from app.platform.plugins.exceptions import PluginNotFound
from app.utils.response import api_response

logger = logging.getLogger(__name__)


def format_validation_error(error_detail):
    """
    Convert a validation error payload into a readable message.

    Handles:
    - Dict format: {'salt': ['This field is required.']} -> "Salt: This field is required."
    - List format: ['Invalid value.'] -> "Invalid value."
    - String format: "error message" -> "error message"
    """
    if isinstance(error_detail, dict):
        messages = []
        for field, errors in error_detail.items():
            if isinstance(errors, (list, tuple)):
                error_strings = [getattr(error, 'string', str(error)) for error in errors]
            else:
                error_strings = [getattr(errors, 'string', str(errors))]

            field_name = field.replace('_', ' ').title()
            messages.append(f"{field_name}: {', '.join(error_strings)}")

        return ". ".join(messages)

    elif isinstance(error_detail, (list, tuple)):
        return ". ".join(getattr(error, 'string', str(error)) for error in error_detail)

    return str(error_detail)


def custom_exception_handler(exc, context):
    """
    Global exception handler: every API error leaves in the api_response() envelope.
    """
    view = context.get('view', None)
    view_name = view.__class__.__name__ if view else 'UnknownView'

    if isinstance(exc, PluginNotFound):
        logger.warning(f"[{view_name}] {exc}")
        return api_response(
            status_code=status.HTTP_404_NOT_FOUND,
            status="failure",
            data={},
            error_code="PLUGIN_NOT_FOUND",
            error_message=str(exc),
        )

    response = exception_handler(exc, context)
    logger.error(f"[{view_name}] Exception: {exc}")

    if isinstance(exc, (NotAuthenticated, AuthenticationFailed)):
        return api_response(
            status_code=status.HTTP_401_UNAUTHORIZED,
            status="failure",
            data={},
            error_code="AUTH_ERROR",
            error_message="Authentication credentials were not provided or invalid."
        )

    if isinstance(exc, PermissionDenied):
        return api_response(
            status_code=status.HTTP_403_FORBIDDEN,
            status="failure",
            data={},
            error_code="PERMISSION_DENIED",
            error_message="You do not have permission to perform this action."
        )

    if isinstance(exc, ValidationError):
        return api_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            status="failure",
            data={},
            error_code="VALIDATION_ERROR",
            error_message=format_validation_error(exc.detail)
        )

    if isinstance(exc, (NotFound, Http404)):
        return api_response(
            status_code=status.HTTP_404_NOT_FOUND,
            status="failure",
            data={},
            error_code="NOT_FOUND",
            error_message=str(exc),
        )

    if isinstance(exc, APIException):
        return api_response(
            status_code=response.status_code if response is not None else exc.status_code,
            status="failure",
            data={},
            error_code="API_EXCEPTION",
            error_message=format_validation_error(exc.detail)
        )

    logger.exception("Unhandled Exception", exc_info=exc)
    return api_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        status="failure",
        data={},
        error_code="INTERNAL_SERVER_ERROR",
        error_message="An unexpected error occurred. Please try again later."
    )
