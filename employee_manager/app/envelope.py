from collections.abc import Mapping

from flask import jsonify, request

from employee_manager.app.errors import ValidationError

_MISSING = object()


def success(result=_MISSING, message=None, **extra):
    """Build a `{Status: true, ...}` response.

    The dashboard client reads both `Result` and `Message`, so either key is
    emitted only when supplied.
    """
    payload = {'Status': True}
    if result is not _MISSING:
        payload['Result'] = result
    if message is not None:
        payload['Message'] = message
    payload.update(extra)
    return jsonify(payload)


def failure(error, status=400):
    return jsonify({'Status': False, 'Error': error}), status


def json_body():
    """The request's JSON object, `{}` when absent; arrays and scalars are rejected."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValidationError('Request body must be a JSON object')
    return data


def require_fields(data, *fields):
    """Return the named values from `data`, rejecting absent or empty ones."""
    if not isinstance(data, Mapping):
        raise ValidationError('Request body must be a JSON object')
    missing = [f for f in fields if data.get(f) in (None, '')]
    if missing:
        raise ValidationError('Missing required fields')
    return [data.get(f) for f in fields]
