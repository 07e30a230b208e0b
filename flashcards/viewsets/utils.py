import logging

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response

from flashcards.exceptions import InvalidQueryParameter

logger = logging.getLogger(__name__)


def _error_response(message, status_code=400, err=None) -> Response:
    data = {'error': message}
    if err:
        data['detail'] = err
    return Response(
        data=data,
        status=status_code
    )


def _handle_exception(exc):
    """
    Log the exception and map known query errors to a 400 response.
    Returns None when the viewset should fall through to the DRF exception handler.
    """
    if isinstance(exc, InvalidQueryParameter):
        logger.warning(exc)
        return _error_response(message="Invalid query parameter", status_code=status.HTTP_400_BAD_REQUEST, err=str(exc))

    if isinstance(exc, (APIException, Http404)):
        logger.info(f"{type(exc).__name__}: {exc}")
    else:
        logger.exception(exc)
    return None
