# incoming/services/exceptions.py


class WebhookError(Exception):
    """Base webhook exception"""


class InvalidSignatureError(WebhookError):
    def __init__(self, message: str = "invalid signature"):
        super().__init__(message)


class MalformedPayloadError(WebhookError):
    pass


class ForwardError(WebhookError):
    """The merchant relay could not even be scheduled."""
