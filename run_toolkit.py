"""
Bean Commons - Command Line Toolkit
Runs the helper modules from the shell: pinyin, QR codes, audio conversion,
random codes and validation.

Usage:
    python run_toolkit.py pinyin 中华人民共和国
    python run_toolkit.py initials 中华人民共和国
    python run_toolkit.py qrcode "https://example.com" -o code.jpg --logo logo.png
    python run_toolkit.py audio-convert voice.m4a voice.wav --rate 16000
    python run_toolkit.py audio-duration voice.m4a
    python run_toolkit.py random --kind number --length 6
    python run_toolkit.py validate email someone@example.com
"""

import os
import sys
import argparse

# Add project root to path
current_dir = os.path.dirname(os.path.abspath(__file__))
if current_dir not in sys.path:
    sys.path.insert(0, current_dir)

from config.settings import settings
from commons import audio, pinyin, qrcode_encoder, randoms, validation
from commons.console_utils import symbol, print_header, print_step, print_result
from commons.io_helper import close_quietly
from commons.logger import setup_logger

logger = setup_logger('run_toolkit')

RANDOM_KINDS = {
    'number': randoms.next_number,
    'upper': randoms.next_upper,
    'lower': randoms.next_lower,
    'word': randoms.next_word,
    'string': randoms.next_string,
}

VALIDATORS = {
    'email': validation.is_valid_email,
    'domain': validation.is_valid_domain,
    'ip': validation.is_valid_ip,
    'mobile': validation.is_valid_mobile,
}


# ==============================================================================
# COMMANDS
# ==============================================================================

def cmd_pinyin(args) -> int:
    print(pinyin.pinyin(args.text))
    return 0


def cmd_initials(args) -> int:
    print(pinyin.pinyin_head_char(args.text))
    return 0


def cmd_qrcode(args) -> int:
    options = qrcode_encoder.QrOptions(
        width=args.size,
        height=args.size,
        image_format=args.format.upper(),
    )
    logo = output = None
    try:
        logo = open(args.logo, 'rb') if args.logo else None
        output = open(args.output, 'wb')
        qrcode_encoder.encode(args.contents, output, logo=logo, options=options)
    except (OSError, ValueError) as e:
        close_quietly(logo, output)
        logger.error(f"QR code generation failed: {e}")
        print_result(False, f"Could not write {args.output}")
        return 1
    print_result(True, f"QR code written to {args.output}")
    return 0


def cmd_audio_convert(args) -> int:
    print_header("Audio Conversion")
    print(f"  ffmpeg: {settings.FFMPEG_PATH}")

    print_step(1, 2, f"Converting {args.src} {symbol.ARROW} {args.dest}")
    exit_code = audio.convert(args.src, args.dest, sample_rate=args.rate)
    if exit_code != 0:
        print_result(False, f"ffmpeg exited with {exit_code}")
        return 1

    print_step(2, 2, "Checking output")
    info = audio.probe(args.dest)
    print_result(True, f"{args.dest}: {info.codec or '?'} {info.sample_rate or '?'} Hz, "
                       f"{audio.format_duration(info.duration) or 'unknown length'}")
    return 0


def cmd_audio_duration(args) -> int:
    text = audio.duration(args.path)
    if text is None:
        print_result(False, f"Could not read duration of {args.path}")
        return 1
    print(f"{text} ({audio.format_duration(text)})")
    return 0


def cmd_random(args) -> int:
    generate = RANDOM_KINDS[args.kind]
    for _ in range(args.count):
        print(generate(args.length))
    return 0


def cmd_validate(args) -> int:
    if args.kind == 'carrier':
        provider = validation.TelecomProvider.detect(args.value)
        print_result(provider is not None, provider.name if provider else "Unknown carrier")
        return 0 if provider else 1

    valid = VALIDATORS[args.kind](args.value)
    print_result(valid, f"{args.value} is {'a valid' if valid else 'not a valid'} {args.kind}")
    return 0 if valid else 1


# ==============================================================================
# ENTRY POINT
# ==============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Bean Commons Toolkit')
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('pinyin', help='Full pinyin of Chinese text')
    p.add_argument('text')
    p.set_defaults(func=cmd_pinyin)

    p = sub.add_parser('initials', help='Upper-case pinyin initials')
    p.add_argument('text')
    p.set_defaults(func=cmd_initials)

    p = sub.add_parser('qrcode', help='Encode text as a QR code image')
    p.add_argument('contents')
    p.add_argument('--output', '-o', required=True, help='Image file to write')
    p.add_argument('--logo', help='Logo image to place in the centre')
    p.add_argument('--size', type=int, default=settings.QR_IMAGE_WIDTH, help='Width and height in pixels')
    p.add_argument('--format', default=settings.QR_IMAGE_FORMAT, help='Image format (JPEG, PNG)')
    p.set_defaults(func=cmd_qrcode)

    p = sub.add_parser('audio-convert', help='Transcode audio with ffmpeg')
    p.add_argument('src')
    p.add_argument('dest')
    p.add_argument('--rate', type=int, default=settings.AUDIO_SAMPLE_RATE, help='Sample rate in Hz')
    p.set_defaults(func=cmd_audio_convert)

    p = sub.add_parser('audio-duration', help='Print the duration of an audio file or URL')
    p.add_argument('path')
    p.set_defaults(func=cmd_audio_duration)

    p = sub.add_parser('random', help='Random codes')
    p.add_argument('--kind', choices=sorted(RANDOM_KINDS), default='string')
    p.add_argument('--length', '-n', type=int, default=6)
    p.add_argument('--count', '-c', type=int, default=1)
    p.set_defaults(func=cmd_random)

    p = sub.add_parser('validate', help='Validate a value')
    p.add_argument('kind', choices=sorted(VALIDATORS) + ['carrier'])
    p.add_argument('value')
    p.set_defaults(func=cmd_validate)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except ValueError as e:
        logger.error(str(e))
        print_result(False, str(e))
        return 2


if __name__ == "__main__":
    sys.exit(main())
