from .message_transport import MessageTransport, SubmissionResult

__all__ = [
    "MessageTransport",
    "SubmissionResult",
]
