from .domain.entities import Message, encode_image, split_addresses
from .domain.ports import MessageTransport, SubmissionResult

__all__ = [
    "Message",
    "MessageTransport",
    "SubmissionResult",
    "encode_image",
    "split_addresses",
]
