"""
Safe resource closing and buffered stream copies.
"""

import os
from typing import Any, BinaryIO, Union

from config.constants import BUFFER_SIZE
from commons.logger import setup_logger

logger = setup_logger('io_helper')

PathLike = Union[str, os.PathLike]


def close_quietly(*closeables: Any) -> None:
    """
    Close every resource, ignoring None entries and close errors.

    Meant for `finally` blocks and cleanup paths where a failing close must
    not mask the original error. Works with anything exposing `close()`:
    files, sockets, selectors, PIL images.
    """
    for closeable in closeables:
        if closeable is None:
            continue
        try:
            closeable.close()
        except Exception as e:
            logger.debug(f"Ignored error closing {closeable!r}: {e}")


def _copy(source: BinaryIO, dest: BinaryIO) -> int:
    total = 0
    while True:
        chunk = source.read(BUFFER_SIZE)
        if not chunk:
            break
        dest.write(chunk)
        total += len(chunk)
    dest.flush()
    return total


def write_stream(dest_path: PathLike, source: BinaryIO) -> int:
    """
    Write a binary stream to a file.

    Both the source stream and the file are closed afterwards.

    Returns:
        Number of bytes written
    """
    if source is None:
        raise ValueError("Source stream must not be None.")
    dest = None
    try:
        dest = open(dest_path, 'wb')
        return _copy(source, dest)
    finally:
        close_quietly(source, dest)


def read_to(src_path: PathLike, dest: BinaryIO) -> int:
    """
    Copy a file into a binary stream.

    Both the file and the destination stream are closed afterwards.

    Returns:
        Number of bytes copied
    """
    if dest is None:
        raise ValueError("Destination stream must not be None.")
    source = None
    try:
        source = open(src_path, 'rb')
        return _copy(source, dest)
    finally:
        close_quietly(source, dest)
