"""
QR Code Encoder - renders text as a QR code image with an optional centred logo.
"""

from typing import BinaryIO, Literal, Optional

import qrcode
from qrcode.constants import ERROR_CORRECT_L, ERROR_CORRECT_M, ERROR_CORRECT_Q, ERROR_CORRECT_H
from PIL import Image, ImageDraw
from pydantic import BaseModel, Field

from config.settings import settings
from commons.io_helper import close_quietly
from commons.logger import setup_logger

logger = setup_logger('qrcode_encoder')

_ERROR_CORRECTION = {
    'L': ERROR_CORRECT_L,   # ~7%
    'M': ERROR_CORRECT_M,   # ~15%
    'Q': ERROR_CORRECT_Q,   # ~25%
    'H': ERROR_CORRECT_H,   # ~30%
}

LOGO_BORDER_COLOR = (255, 255, 255)
LOGO_INNER_BORDER_COLOR = (128, 128, 128)
LOGO_CORNER_RADIUS = 10


class QrOptions(BaseModel):
    """Rendering options; defaults come from settings."""
    width: int = Field(default_factory=lambda: settings.QR_IMAGE_WIDTH, gt=0, description="Image width in pixels")
    height: int = Field(default_factory=lambda: settings.QR_IMAGE_HEIGHT, gt=0, description="Image height in pixels")
    image_format: str = Field(default_factory=lambda: settings.QR_IMAGE_FORMAT, description="PIL format name, e.g. JPEG or PNG")
    error_correction: Literal['L', 'M', 'Q', 'H'] = Field('H', description="Error correction level")
    margin: int = Field(1, ge=0, description="Quiet zone in modules")


def _render_matrix(contents: str, options: QrOptions) -> Image.Image:
    qr = qrcode.QRCode(
        error_correction=_ERROR_CORRECTION[options.error_correction],
        border=options.margin,
    )
    # qrcode encodes non-Latin-1 text as UTF-8 bytes
    qr.add_data(contents)
    qr.make(fit=True)
    image = qr.make_image(fill_color="black", back_color="white").get_image()
    return image.convert('RGB').resize((options.width, options.height), Image.Resampling.NEAREST)


def _paste_logo(image: Image.Image, logo: BinaryIO) -> Image.Image:
    """Draw the logo at 1/5 size in the centre, framed by white and grey rounded borders."""
    width, height = image.size
    left, top = width // 5 * 2, height // 5 * 2
    logo_width, logo_height = width // 5, height // 5

    with Image.open(logo) as source:
        mark = source.convert('RGBA').resize((logo_width, logo_height))
    image.paste(mark, (left, top), mark)

    draw = ImageDraw.Draw(image)
    draw.rounded_rectangle(
        (left, top, left + logo_width, top + logo_height),
        radius=LOGO_CORNER_RADIUS, outline=LOGO_BORDER_COLOR, width=5
    )
    draw.rounded_rectangle(
        (left + 2, top + 2, left + logo_width - 2, top + logo_height - 2),
        radius=LOGO_CORNER_RADIUS, outline=LOGO_INNER_BORDER_COLOR, width=1
    )
    return image


def encode(
    contents: str,
    output: BinaryIO,
    logo: Optional[BinaryIO] = None,
    options: Optional[QrOptions] = None
) -> None:
    """
    Encode text as a QR code image.

    Args:
        contents: Text to encode (UTF-8)
        output: Binary stream receiving the image; closed afterwards
        logo: Optional binary stream with a logo image; closed afterwards
        options: Size, format and error correction, defaults to 300x300 JPEG level H

    Raises:
        ValueError: If contents is empty
        OSError: If the image cannot be written
    """
    try:
        if not contents:
            raise ValueError("QR code contents must not be empty.")
        options = options or QrOptions()

        image = _render_matrix(contents, options)
        if logo is not None:
            image = _paste_logo(image, logo)

        image.save(output, format=options.image_format)
        output.flush()
        logger.debug(f"Encoded {len(contents)} chars as {options.width}x{options.height} {options.image_format}")
    finally:
        close_quietly(output, logo)
