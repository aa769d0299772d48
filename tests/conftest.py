import pytest
from PIL import Image

from send_message import Message


@pytest.fixture
def red_image() -> Image.Image:
    return Image.new("RGB", (32, 16), color=(255, 0, 0))


@pytest.fixture
def blue_image() -> Image.Image:
    return Image.new("RGBA", (8, 24), color=(0, 0, 255, 128))


@pytest.fixture
def sample_message() -> Message:
    return Message.create("hi", addresses=["555-1111", "555-2222"])
