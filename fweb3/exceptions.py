"""
Request validation errors.

Raised before any upstream call; the router maps ``status_code`` to the HTTP response.
"""


class RequestValidationError(Exception):
    status_code = 400


class MissingRequestError(RequestValidationError):
    def __init__(self, message: str = "No request to validate"):
        super().__init__(message)


class UnsupportedMethodError(RequestValidationError):
    status_code = 405

    def __init__(self, message: str = "Unsupported request method"):
        super().__init__(message)


class MissingParamsError(RequestValidationError):
    def __init__(self, message: str = "Missing request params"):
        super().__init__(message)


class MissingApiKeyError(RequestValidationError):
    status_code = 500

    def __init__(self, message: str = "missing api key"):
        super().__init__(message)
