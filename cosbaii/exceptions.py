import logging

from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class Conflict(APIException):
    """重复提交，如同一用户对同一竞赛的第二条参赛记录"""
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Resource already exists.'
    default_code = 'conflict'


class InvalidState(APIException):
    """对象当前状态不允许该操作"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Operation not allowed in the current state.'
    default_code = 'invalid_state'


def _first_message(detail):
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
        return 'Validation failed'
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else 'Validation failed'
    return str(detail)


def api_exception_handler(exc, context):
    """
    统一错误格式：{"error": "...", "details": {...}}
    字段校验错误保留到 details，其余只返回一句概要。
    """
    response = exception_handler(exc, context)

    if response is None:
        # 非 DRF 异常：记录详细堆栈，只返回通用提示
        view = context.get('view')
        logger.exception("Unhandled error in %s", view.__class__.__name__ if view else 'unknown view')
        return Response({'error': 'Internal server error'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, ValidationError):
        details = exc.detail if isinstance(exc.detail, dict) else {'non_field_errors': exc.detail}
        response.data = {
            'error': _first_message(exc.detail),
            'details': details,
        }
    else:
        # Django 的 Http404 / PermissionDenied 没有 detail，统一从 response.data 取
        response.data = {'error': _first_message(response.data)}

    if response.status_code >= 500:
        logger.error("API error %s: %s", response.status_code, exc)
    return response
