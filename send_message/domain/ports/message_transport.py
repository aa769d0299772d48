"""
Outbound port for handing a message to a transport.

Sending is not done here: adapters for SMS/MMS gateways, HTTP APIs and the
like implement this interface outside the package.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..entities import Message


@dataclass
class SubmissionResult:
    """Result of handing a message to a transport."""

    success: bool
    external_id: str | None = None
    error: str | None = None


class MessageTransport(ABC):
    """
    Outbound port the finished Message is handed to.

    Implementations report failures through ``SubmissionResult`` instead of
    raising. Image encoding is blocking, so async implementations should
    run ``Message.encode_images`` off the event loop.
    """

    @abstractmethod
    async def submit(self, message: Message) -> SubmissionResult:
        """
        Submit a message for delivery.

        Args:
            message: Message with text, recipients and attachments

        Returns:
            SubmissionResult with success status and external ID
        """
        ...
