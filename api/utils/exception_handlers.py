# api/utils/exception_handlers.py
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework.exceptions import ValidationError
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status
import logging

logger = logging.getLogger(__name__)

STATUS_MESSAGES = {
    400: 'Error en los datos enviados',
    404: 'Recurso no encontrado',
    405: 'Método no permitido',
    429: 'Demasiadas solicitudes',
    500: 'Error interno del servidor',
}


def custom_exception_handler(exc, context):
    """
    Convierte cualquier excepción de la API al formato estándar:
    {success, status_code, message, data, errors}.

    Las ValidationError de Django (p. ej. full_clean en el repositorio)
    se responden como 400 igual que las de DRF.
    """
    if isinstance(exc, DjangoValidationError):
        exc = ValidationError(detail=_django_validation_detail(exc))

    response = exception_handler(exc, context)

    if response is not None:
        logger.error(
            f"API Error: {exc.__class__.__name__} - {str(exc)}",
            extra={'status_code': response.status_code}
        )

        response.data = {
            'success': False,
            'status_code': response.status_code,
            'message': _get_error_message(exc, response),
            'data': None,
            'errors': _format_errors(response.data)
        }
    else:
        # Excepción no manejada por DRF (500 Internal Server Error)
        logger.critical(
            f"Unhandled Exception: {exc.__class__.__name__} - {str(exc)}",
            exc_info=exc
        )

        response = Response(
            {
                'success': False,
                'status_code': 500,
                'message': STATUS_MESSAGES[500],
                'data': None,
                'errors': {'detail': ['Ha ocurrido un error inesperado']}
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return response


def _django_validation_detail(exc):
    if hasattr(exc, 'error_dict'):
        return exc.message_dict
    return exc.messages


def _get_error_message(exc, response):
    """Primer mensaje de error, o uno genérico según el status code"""
    detail = getattr(exc, 'detail', None)
    if isinstance(detail, dict) and detail:
        first_error = next(iter(detail.values()))
        return str(first_error[0]) if isinstance(first_error, list) else str(first_error)
    if isinstance(detail, list) and detail:
        return str(detail[0])
    if detail:
        return str(detail)

    return STATUS_MESSAGES.get(response.status_code, 'Error en la solicitud')


def _format_errors(data):
    """Normaliza los errores a {campo: [mensajes]}"""
    if isinstance(data, dict):
        errors = {}
        for field, messages in data.items():
            if isinstance(messages, list):
                errors[field] = [str(m) for m in messages]
            elif isinstance(messages, dict):
                errors[field] = _format_errors(messages)
            else:
                errors[field] = [str(messages)]
        return errors
    elif isinstance(data, list):
        return {'non_field_errors': [str(m) for m in data]}
    else:
        return {'detail': [str(data)]}
