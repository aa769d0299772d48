from .message import Message, encode_image, split_addresses

__all__ = [
    "Message",
    "encode_image",
    "split_addresses",
]
