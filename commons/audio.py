"""
Audio Utilities - transcoding and probing through an external ffmpeg binary.

ffmpeg must be installed. Its location comes from settings.FFMPEG_PATH
(env FFMPEG_PATH, then PATH, then a `~/ffmpeg` symlink).
"""

import os
import re
from typing import List, Optional

from pydantic import BaseModel, Field

from config.settings import settings
from commons.exec_utils import ExecUtil
from commons.helpers import coerce_number
from commons.logger import setup_logger

logger = setup_logger('audio')

_DURATION_LINE = re.compile(r'^Duration:')
_BITRATE = re.compile(r'bitrate:\s*(\d+)\s*kb/s')
_AUDIO_STREAM = re.compile(r'Stream #\S+.*?Audio:\s*([^,\s]+)[^,]*(?:,\s*(\d+)\s*Hz)?(?:,\s*([^,]+))?')


class MediaInfo(BaseModel):
    """What ffmpeg reports about a media file."""
    path: str = Field(..., description="Local path or URL that was probed")
    duration: Optional[str] = Field(None, description="Duration as HH:MM:SS.ss")
    duration_seconds: Optional[float] = Field(None, description="Duration in seconds")
    bitrate_kbps: Optional[int] = Field(None, description="Overall bitrate in kb/s")
    codec: Optional[str] = Field(None, description="Audio codec of the first audio stream")
    sample_rate: Optional[int] = Field(None, description="Sample rate in Hz")
    channels: Optional[str] = Field(None, description="Channel layout, e.g. 'mono' or 'stereo'")


def _ffmpeg_output(path: str) -> Optional[str]:
    # `ffmpeg -i` without an output file exits 1 after printing the input info
    cmds = [settings.FFMPEG_PATH, '-i', path]
    return ExecUtil().exe_and_read_all_output(settings.FFMPEG_WORK_DIR, cmds)


def convert(src: str, dest: str, sample_rate: Optional[int] = None) -> Optional[int]:
    """
    Transcode an audio file; the format follows the destination extension.

    Args:
        src: Input file
        dest: Output file, overwritten if present
        sample_rate: Output sample rate (16000, 8000, 44100...), defaults to
            settings.AUDIO_SAMPLE_RATE

    Returns:
        ffmpeg exit code, or None if ffmpeg could not be started
    """
    if sample_rate is None:
        sample_rate = settings.AUDIO_SAMPLE_RATE
    if sample_rate <= 0:
        raise ValueError(f"Sample rate must be positive, got {sample_rate}")
    exit_code = ExecUtil().execute(
        settings.FFMPEG_WORK_DIR,
        settings.FFMPEG_PATH, '-y', '-i', os.path.abspath(src),
        '-ar', str(sample_rate), os.path.abspath(dest)
    )
    if exit_code != 0:
        logger.error(f"ffmpeg conversion {src} -> {dest} failed (exit code {exit_code})")
    else:
        logger.info(f"Converted {src} -> {dest} at {sample_rate} Hz")
    return exit_code


def parse_duration(output: Optional[str]) -> Optional[str]:
    """Extract `HH:MM:SS.ss` from the `Duration:` line of ffmpeg output."""
    if not output:
        return None
    for raw_line in output.splitlines():
        line = raw_line.strip()
        if _DURATION_LINE.match(line):
            first = line.split(',')[0].strip()
            return first[first.index(':') + 1:].strip() or None
    return None


def duration(path: str) -> Optional[str]:
    """
    Duration of a local or remote audio file.

    Returns:
        Duration such as '00:00:04.32', or None if ffmpeg failed
    """
    return parse_duration(_ffmpeg_output(path))


def duration_to_seconds(text: Optional[str]) -> Optional[float]:
    if not text:
        return None
    parts = text.split(':')
    if len(parts) != 3:
        return None
    hours, minutes, seconds = (coerce_number(p) for p in parts)
    if hours is None or minutes is None or seconds is None:
        return None
    return hours * 3600 + minutes * 60 + seconds


def format_duration(text: Optional[str]) -> Optional[str]:
    """
    Format HH:MM:SS.ss as X′Y″, ignoring hours.

    Examples:
        >>> format_duration("00:01:04.32")
        '1′4.32″'
        >>> format_duration("00:00:04.32")
        '4.32″'
    """
    if text is None or not text.strip():
        return None
    parts = text.split(':')
    if len(parts) != 3:
        return None

    minutes = int(parts[1])
    seconds = float(parts[2])
    if minutes == 0:
        return f"{seconds}″"
    return f"{minutes}′{seconds}″"


def parse_media_info(path: str, output: Optional[str]) -> MediaInfo:
    """Build MediaInfo from `ffmpeg -i` output."""
    text = parse_duration(output)
    info = {
        'path': path,
        'duration': text,
        'duration_seconds': duration_to_seconds(text),
    }
    lines: List[str] = (output or '').splitlines()
    for line in lines:
        stripped = line.strip()
        if info.get('bitrate_kbps') is None and stripped.startswith('Duration:'):
            match = _BITRATE.search(stripped)
            if match:
                info['bitrate_kbps'] = coerce_number(match.group(1), int)
        if 'codec' not in info and 'Audio:' in stripped:
            match = _AUDIO_STREAM.search(stripped)
            if match:
                info['codec'] = match.group(1)
                info['sample_rate'] = coerce_number(match.group(2), int)
                info['channels'] = match.group(3).strip() if match.group(3) else None
    return MediaInfo(**info)


def probe(path: str) -> MediaInfo:
    """Probe a media file with ffmpeg."""
    output = _ffmpeg_output(path)
    if output is None:
        logger.error(f"ffmpeg could not read {path}")
    return parse_media_info(path, output)
