"""
Configuration settings loader.
Loads environment variables from .env file and exposes typed settings for the
helper modules (ffmpeg location, QR code defaults, bean access strictness).
"""

import os
import shutil
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env
project_root = Path(__file__).parent.parent
env_path = project_root / '.env'
load_dotenv(dotenv_path=env_path)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


class Settings:
    """Application settings read once from the environment."""

    def __init__(self):
        self._ffmpeg_path = os.getenv('FFMPEG_PATH')
        self.AUDIO_SAMPLE_RATE = _env_int('AUDIO_SAMPLE_RATE', 16000)

        self.QR_IMAGE_WIDTH = _env_int('QR_IMAGE_WIDTH', 300)
        self.QR_IMAGE_HEIGHT = _env_int('QR_IMAGE_HEIGHT', 300)
        self.QR_IMAGE_FORMAT = os.getenv('QR_IMAGE_FORMAT', 'JPEG').upper()

        # Raise instead of logging when a getter/setter cannot be found
        self.STRICT_PROPERTY_ACCESS = _env_bool('STRICT_PROPERTY_ACCESS', False)
        # None keeps every introspected class for the life of the process
        self.METADATA_CACHE_MAX_TYPES = _env_int('METADATA_CACHE_MAX_TYPES', None)

        if self.AUDIO_SAMPLE_RATE <= 0:
            raise ValueError(
                f"AUDIO_SAMPLE_RATE must be positive, got {self.AUDIO_SAMPLE_RATE}"
            )
        if self.METADATA_CACHE_MAX_TYPES is not None and self.METADATA_CACHE_MAX_TYPES <= 0:
            raise ValueError(
                "METADATA_CACHE_MAX_TYPES must be a positive integer when set"
            )

    @property
    def FFMPEG_PATH(self) -> str:
        """
        Location of the ffmpeg binary.

        Resolution order: FFMPEG_PATH env var, `ffmpeg` on PATH, then the
        `~/ffmpeg` symlink convention used on servers without a package install.
        """
        if self._ffmpeg_path:
            return self._ffmpeg_path
        on_path = shutil.which('ffmpeg')
        if on_path:
            return on_path
        home_link = Path.home() / 'ffmpeg'
        if home_link.exists():
            return str(home_link)
        return 'ffmpeg'

    @property
    def FFMPEG_WORK_DIR(self) -> str:
        return os.getenv('FFMPEG_WORK_DIR', str(Path.home()))

    # --- Helpers ---

    @staticmethod
    def mask_value(value: str) -> str:
        """
        Mask a sensitive value for logging.
        Shows only the first 3 and last 4 characters.

        Args:
            value: The value to mask

        Returns:
            Masked value (e.g., '138****5678')
        """
        if not value or len(value) < 8:
            return "****"
        return f"{value[:3]}****{value[-4:]}"


# Global settings instance
settings = Settings()
