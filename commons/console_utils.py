"""
Console Utilities - safe console output for the command-line tools.
Handles platform-specific encoding issues (e.g., Windows GBK vs Unicode).
"""

import os


def is_windows() -> bool:
    return os.name == 'nt'


class Symbol:
    """
    Console symbols that adapt to the platform.
    Unicode marks on Posix terminals, ASCII tags on Windows.
    """

    @property
    def OK(self) -> str:
        return "[OK]" if is_windows() else "✓"

    @property
    def FAIL(self) -> str:
        return "[ERROR]" if is_windows() else "✗"

    @property
    def INFO(self) -> str:
        return "[INFO]" if is_windows() else "ℹ"

    @property
    def ARROW(self) -> str:
        return "->" if is_windows() else "➜"


# Global instance
symbol = Symbol()


def print_header(title: str):
    print("=" * 60)
    print(f"  {title}")
    print("=" * 60)


def print_step(step: int, total: int, message: str):
    """Print a formatted step header."""
    header = f"[{step}/{total}] {message}"
    print(f"\n{header}")
    print("-" * len(header))


def print_result(ok: bool, message: str):
    mark = symbol.OK if ok else symbol.FAIL
    print(f"  {mark} {message}")
