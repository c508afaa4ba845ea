"""
Display image resolution for catalog cars.

Remote image services are unreliable, so a car's picture is resolved through
an ordered cascade of strategies. Each reported load failure moves one step
down the cascade, which ends in an inline SVG that needs no network at all.
"""

from __future__ import annotations

import base64
import hashlib
from enum import IntEnum
from urllib.parse import quote_plus
from xml.sax.saxutils import escape

IMAGE_WIDTH = 400
IMAGE_HEIGHT = 300

# Background colors for generated images (hex, no leading '#')
PALETTE = (
    "2c3e50",
    "34495e",
    "16a085",
    "2980b9",
    "8e44ad",
    "c0392b",
    "d35400",
)


class ImageStrategy(IntEnum):
    """Fallback cascade, in the order strategies are attempted."""

    PHOTO = 0
    DUMMY_IMAGE = 1
    PLACEHOLDER = 2
    SVG = 3

    @property
    def is_terminal(self) -> bool:
        return self is ImageStrategy.SVG

    @classmethod
    def for_attempt(cls, attempt: int) -> ImageStrategy:
        """Strategy used on the given zero-based load attempt (clamped to SVG)."""
        if attempt < 0:
            raise ValueError("attempt must be >= 0")
        return cls(min(attempt, cls.SVG))


def image_seed(make: str, model: str) -> int:
    """Non-negative seed derived from ``make + model``, stable across processes."""
    digest = hashlib.sha256(f"{make}{model}".encode("utf-8")).digest()
    return int.from_bytes(digest[:4], "big")


def background_color(make: str, model: str) -> str:
    return PALETTE[image_seed(make, model) % len(PALETTE)]


def image_url(make: str, model: str, strategy: ImageStrategy) -> str:
    """Build the display URL for ``(make, model)`` under ``strategy``."""
    text = f"{make} {model}"

    if strategy is ImageStrategy.PHOTO:
        return (
            f"https://picsum.photos/seed/{image_seed(make, model)}"
            f"/{IMAGE_WIDTH}/{IMAGE_HEIGHT}"
        )
    if strategy is ImageStrategy.DUMMY_IMAGE:
        return (
            f"https://dummyimage.com/{IMAGE_WIDTH}x{IMAGE_HEIGHT}"
            f"/{background_color(make, model)}/ffffff&text={quote_plus(text)}"
        )
    if strategy is ImageStrategy.PLACEHOLDER:
        return (
            f"https://via.placeholder.com/{IMAGE_WIDTH}x{IMAGE_HEIGHT}"
            f"?text={quote_plus(text)}"
        )
    return svg_data_uri(make, model)


def svg_data_uri(make: str, model: str) -> str:
    """Inline SVG naming the car, as a base64 ``data:`` URI."""
    svg = (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{IMAGE_WIDTH}" height="{IMAGE_HEIGHT}" '
        f'viewBox="0 0 {IMAGE_WIDTH} {IMAGE_HEIGHT}">'
        f'<rect width="100%" height="100%" fill="#{background_color(make, model)}"/>'
        '<text x="50%" y="45%" font-family="Arial, sans-serif" font-size="28" '
        f'fill="#ffffff" text-anchor="middle">{escape(make)}</text>'
        '<text x="50%" y="60%" font-family="Arial, sans-serif" font-size="22" '
        f'fill="#ffffff" text-anchor="middle">{escape(model)}</text>'
        "</svg>"
    )
    encoded = base64.b64encode(svg.encode("utf-8")).decode("ascii")
    return f"data:image/svg+xml;base64,{encoded}"


class ImageResolver:
    """
    Image resolution state for one displayed car.

    - Starts at ImageStrategy.PHOTO
    - on_load_failure() advances exactly one strategy; no-op once at SVG
    - resolve() with a different (make, model) resets to ImageStrategy.PHOTO

    Instances are owned by the caller displaying the car and are never shared
    between displays.
    """

    def __init__(self, make: str = "", model: str = "") -> None:
        self._identity = (make, model)
        self._strategy = ImageStrategy.PHOTO

    @property
    def strategy(self) -> ImageStrategy:
        return self._strategy

    def resolve(self, make: str, model: str) -> str:
        if (make, model) != self._identity:
            self._identity = (make, model)
            self._strategy = ImageStrategy.PHOTO

        return self.current_url()

    def on_load_failure(self) -> str:
        if not self._strategy.is_terminal:
            self._strategy = ImageStrategy(self._strategy + 1)

        return self.current_url()

    def current_url(self) -> str:
        make, model = self._identity
        return image_url(make, model, self._strategy)
