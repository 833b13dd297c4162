"""Terminal Output Formatting Package"""

import os
import re
import sys
import threading

from commitgen import COMMIT_TYPE_NAMES


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'
    MAGENTA = '\033[35m'


def _supports_color(stream=None) -> bool:
    stream = stream or sys.stdout
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    return hasattr(stream, 'isatty') and stream.isatty()


def _supports_unicode() -> bool:
    try:
        '✓⠋'.encode(sys.stdout.encoding or 'utf-8')
        return True
    except (UnicodeEncodeError, LookupError):
        return False


COLORS_ENABLED = _supports_color()
UNICODE_ENABLED = _supports_unicode()

CHECK = '✓' if UNICODE_ENABLED else '[OK]'
CROSS = '✗' if UNICODE_ENABLED else '[X]'


def _colorize(text: str, *codes: str) -> str:
    if not COLORS_ENABLED:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def success(text: str) -> str:
    return _colorize(text, Colors.GREEN)


def error(text: str) -> str:
    return _colorize(text, Colors.RED)


def warning(text: str) -> str:
    return _colorize(text, Colors.YELLOW)


def info(text: str) -> str:
    return _colorize(text, Colors.CYAN)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def bold(text: str) -> str:
    return _colorize(text, Colors.BOLD)


def print_error(message: str) -> None:
    print(f"{error(CROSS)} {bold(error('Error:'))} {message}", file=sys.stderr)


COMMIT_TYPE_COLORS = {
    'feat': Colors.GREEN,
    'fix': Colors.RED,
    'refactor': Colors.YELLOW,
    'docs': Colors.CYAN,
    'test': Colors.MAGENTA,
    'perf': Colors.GREEN,
    'chore': Colors.DIM,
    'style': Colors.DIM,
    'ci': Colors.CYAN,
    'build': Colors.CYAN,
}

_TYPE_PREFIX = re.compile(rf'^({"|".join(COMMIT_TYPE_NAMES)})(\([^)]*\))?(!?:)')


def colorize_commit_type(message: str) -> str:
    """Color the conventional type prefix on the first line, if there is one."""
    if not COLORS_ENABLED:
        return message
    lines = message.split('\n')
    match = _TYPE_PREFIX.match(lines[0])
    if match:
        prefix = match.group(0)
        color = COMMIT_TYPE_COLORS[match.group(1)]
        lines[0] = _colorize(prefix, Colors.BOLD, color) + lines[0][len(prefix):]
    return '\n'.join(lines)


def display_message(message: str) -> None:
    """Print a commit message between horizontal rules with a bold subject."""
    lines = colorize_commit_type(message).split('\n')
    # Width from the raw text, ANSI codes excluded
    width = max((len(line) for line in message.split('\n')), default=40)
    rule = '─' if UNICODE_ENABLED else '-'
    print(f"\n{dim(rule * width)}")
    print(bold(lines[0]))
    for line in lines[1:]:
        print(line)
    print(dim(rule * width))


class Spinner:
    """Animated spinner for long operations. Use as context manager."""
    FRAMES_UNICODE = ['⠋', '⠙', '⠹', '⠸', '⠼', '⠴', '⠦', '⠧', '⠇', '⠏']
    FRAMES_ASCII = ['-', '\\', '|', '/']

    def __init__(self, message: str = "Generating commit message...", stream=None):
        self.message = message
        self._stream = stream or sys.stdout
        self._thread = None
        self._stop_event = threading.Event()
        self._frames = self.FRAMES_UNICODE if UNICODE_ENABLED else self.FRAMES_ASCII

    def _spin(self):
        idx = 0
        while not self._stop_event.is_set():
            frame = self._frames[idx % len(self._frames)]
            print(f'\r\033[K{success(frame)} {self.message}', end='', flush=True, file=self._stream)
            idx += 1
            self._stop_event.wait(0.08)

    def _active(self) -> bool:
        return hasattr(self._stream, 'isatty') and self._stream.isatty()

    def __enter__(self):
        if self._active():
            self._stop_event.clear()
            self._thread = threading.Thread(target=self._spin, daemon=True)
            self._thread.start()
        return self

    def __exit__(self, *args):
        self._stop_event.set()
        if self._thread:
            self._thread.join()
            self._thread = None
        if self._active():
            print('\r\033[K', end='', flush=True, file=self._stream)


__all__ = [
    "Colors", "COLORS_ENABLED", "UNICODE_ENABLED",
    "CHECK", "CROSS",
    "success", "error", "warning", "info", "dim", "bold",
    "print_error",
    "colorize_commit_type", "display_message", "Spinner", "COMMIT_TYPE_COLORS",
]
