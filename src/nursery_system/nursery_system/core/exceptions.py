"""Exceptions raised by services; controllers map them to HTTP statuses."""


class NurseryError(Exception):
    status_code = 400


class ValidationError(NurseryError):
    """Bad input: blank fields, malformed dates, duplicate emails."""


class AuthenticationError(NurseryError):
    status_code = 401


class AuthorizationError(NurseryError):
    """The resolved role lacks the permission the operation needs."""

    status_code = 403


class NotFoundError(NurseryError):
    status_code = 404
