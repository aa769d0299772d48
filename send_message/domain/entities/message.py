from dataclasses import dataclass, field

from PIL import Image

from ...infrastructure.imaging import encode_png
from ...infrastructure.logging import mask_address

ADDRESS_DELIMITER = " "


def split_addresses(address: str) -> list[str]:
    """
    Turn one address field into a list of recipients.

    The string is trimmed and split on single spaces, so "123 456" holds two
    recipients. An empty or blank string gives ``[""]``.
    """
    return address.strip().split(ADDRESS_DELIMITER)


def encode_image(image: Image.Image) -> bytes:
    """Encode an attachment as lossless PNG bytes, ready for a transport."""
    return encode_png(image)


@dataclass(repr=False)
class Message:
    """
    Outgoing message: body text, recipient addresses and image attachments.

    Addresses and images keep insertion order and are never de-duplicated or
    validated. Images are held by reference; closing them stays with the
    caller.

    The getters return the live lists rather than copies, so mutating what
    ``get_addresses()`` or ``get_images()`` returns changes the message.
    """

    text: str = ""
    addresses: list[str] | None = field(default_factory=lambda: [""])
    images: list[Image.Image] | None = field(default_factory=list)

    @classmethod
    def create(
        cls,
        text: str = "",
        *,
        address: str | None = None,
        addresses: list[str] | None = None,
        image: Image.Image | None = None,
        images: list[Image.Image] | None = None,
    ) -> "Message":
        """
        Factory method to build a message from any combination of options.

        Args:
            text: Message body
            address: One string of space-separated recipients
            addresses: Recipients, stored as given (not copied)
            image: A single attachment
            images: Attachments, stored as given (not copied)

        Raises:
            ValueError: If both ``address`` and ``addresses`` (or both
                ``image`` and ``images``) are given.
        """
        if address is not None and addresses is not None:
            raise ValueError("Pass either address or addresses, not both")
        if image is not None and images is not None:
            raise ValueError("Pass either image or images, not both")

        if address is not None:
            recipients = split_addresses(address)
        elif addresses is not None:
            recipients = addresses
        else:
            recipients = [""]

        if image is not None:
            attachments = [image]
        elif images is not None:
            attachments = images
        else:
            attachments = []

        return cls(text=text, addresses=recipients, images=attachments)

    def set_text(self, text: str) -> None:
        self.text = text

    def set_addresses(self, addresses: list[str] | None) -> None:
        self.addresses = addresses

    def set_address(self, address: str) -> None:
        """Replace all recipients with a single one (no splitting)."""
        self.addresses = [address]

    def set_images(self, images: list[Image.Image] | None) -> None:
        self.images = images

    def set_image(self, image: Image.Image) -> None:
        """Replace all attachments with a single one."""
        self.images = [image]

    def add_address(self, address: str) -> None:
        """Append a recipient after the existing ones."""
        if self.addresses is None:
            self.addresses = []
        self.addresses.append(address)

    def add_image(self, image: Image.Image) -> None:
        """Append an attachment after the existing ones."""
        if self.images is None:
            self.images = []
        self.images.append(image)

    def get_text(self) -> str:
        return self.text

    def get_addresses(self) -> list[str] | None:
        return self.addresses

    def get_images(self) -> list[Image.Image] | None:
        return self.images

    @property
    def has_images(self) -> bool:
        return bool(self.images)

    def encode_images(self) -> list[bytes]:
        """PNG-encode every attachment, in order."""
        return [encode_image(image) for image in self.images or []]

    encode_image = staticmethod(encode_image)

    def __repr__(self) -> str:
        recipients = [mask_address(a) for a in self.addresses or []]
        return (
            f"Message(text={self.text!r}, addresses={recipients!r}, "
            f"images={len(self.images or [])})"
        )
