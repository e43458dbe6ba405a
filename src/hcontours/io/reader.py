"""Image reader for loading raster images.

This module provides the ImageReader class for decoding image files
with Pillow and converting them to a LuminanceField.
"""

from pathlib import Path

from PIL import Image, UnidentifiedImageError

from hcontours.domain import LuminanceField
from hcontours.exceptions import ImageLoadError


def _to_eight_bit(image: Image.Image) -> Image.Image:
    """Scale 16-bit greyscale samples down to 8 bits.

    Pillow clips ``I`` and ``I;16`` pixels at 255 when converting to RGB,
    so their high byte is kept instead.
    """
    if image.mode.startswith("I;16"):
        image = image.convert("I")
    if image.mode == "I":
        return image.point(lambda v: v / 256).convert("L")
    return image


class ImageReader:
    """Loads raster images and exposes their luminance.

    Any format Pillow can decode is accepted. Pixels are converted to RGB
    (alpha is ignored) before computing luminance.

    Example:
        reader = ImageReader(Path("photo.png"))
        reader.load()
        field = reader.luminance()
    """

    def __init__(self, image_path: Path) -> None:
        """Initialize the image reader.

        Args:
            image_path: Path to the image file
        """
        self._image_path = image_path
        self._image: Image.Image | None = None

    def load(self) -> None:
        """Load and decode the image file.

        Raises:
            FileNotFoundError: If the image file does not exist
            ImageLoadError: If the file cannot be decoded
        """
        if not self._image_path.exists():
            raise FileNotFoundError(f"Image file not found: {self._image_path}")

        try:
            with Image.open(self._image_path) as image:
                image.load()
                self._image = _to_eight_bit(image).convert("RGB")
        except (UnidentifiedImageError, OSError) as e:
            raise ImageLoadError(str(self._image_path), str(e)) from e

    def _require_image(self) -> Image.Image:
        if self._image is None:
            raise RuntimeError("Image not loaded. Call load() first.")
        return self._image

    @property
    def width(self) -> int:
        """Image width in pixels.

        Raises:
            RuntimeError: If image has not been loaded yet
        """
        return self._require_image().width

    @property
    def height(self) -> int:
        """Image height in pixels.

        Raises:
            RuntimeError: If image has not been loaded yet
        """
        return self._require_image().height

    @property
    def format(self) -> str:
        """Image format as detected from the file suffix."""
        return self._image_path.suffix.lstrip(".").upper() or "unknown"

    def luminance(self) -> LuminanceField:
        """Return the luminance of every pixel.

        Returns:
            LuminanceField of the decoded image

        Raises:
            RuntimeError: If image has not been loaded yet
        """
        image = self._require_image()
        data = image.tobytes()
        pixels = zip(data[0::3], data[1::3], data[2::3])
        return LuminanceField.from_rgb(image.width, image.height, pixels)

    def close(self) -> None:
        """Release the decoded image."""
        if self._image is not None:
            self._image.close()
            self._image = None

    def __enter__(self) -> "ImageReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
