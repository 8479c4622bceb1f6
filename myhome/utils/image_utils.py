"""
Image processing for house member documents.
"""

import io

from PIL import Image, UnidentifiedImageError

DEFAULT_JPEG_QUALITY = 75


class ImageProcessor:
    """Decode uploaded bytes and re-encode them as JPEG."""

    @staticmethod
    def open_image(content: bytes) -> Image.Image:
        """Open and validate image bytes"""
        try:
            image = Image.open(io.BytesIO(content))
            image.load()
            return image
        except (UnidentifiedImageError, OSError) as e:
            raise ValueError(f"Invalid image file: {e}") from e

    @staticmethod
    def to_rgb(image: Image.Image) -> Image.Image:
        """Flatten transparency onto a white background so the image can be saved as JPEG"""
        if image.mode in ('RGBA', 'P', 'LA'):
            if image.mode == 'P':
                image = image.convert('RGBA')
            background = Image.new('RGB', image.size, (255, 255, 255))
            background.paste(image, mask=image.split()[-1])
            return background
        if image.mode != 'RGB':
            return image.convert('RGB')
        return image

    @classmethod
    def to_jpeg_bytes(cls, image: Image.Image, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
        buffer = io.BytesIO()
        cls.to_rgb(image).save(buffer, format='JPEG', quality=quality, optimize=True)
        return buffer.getvalue()

    @staticmethod
    def quality_from_fraction(fraction: float) -> int:
        """Map a 0..1 compression quality onto Pillow's 1..95 JPEG scale"""
        return max(1, min(95, int(round(fraction * 100))))
