"""CLI Utility Functions"""

import subprocess
import sys

# Clipboard commands tried in order per platform
CLIPBOARD_COMMANDS = {
    'win32': [['clip']],
    'darwin': [['pbcopy']],
    'linux': [['wl-copy'], ['xclip', '-selection', 'clipboard'], ['xsel', '--clipboard', '--input']],
}


def _clipboard_commands(platform: str) -> list[list[str]]:
    for prefix, commands in CLIPBOARD_COMMANDS.items():
        if platform.startswith(prefix):
            return commands
    return CLIPBOARD_COMMANDS['linux']


def copy_to_clipboard(text: str, platform: str | None = None) -> tuple[bool, str]:
    """Copy text with the first clipboard tool that exists. Returns (success, failure_reason)."""
    commands = _clipboard_commands(platform or sys.platform)
    data = text.encode('utf-8')
    for command in commands:
        try:
            subprocess.run(command, input=data, check=True, capture_output=True)
            return True, ""
        except FileNotFoundError:
            continue
        except (subprocess.CalledProcessError, OSError) as e:
            return False, f"{command[0]} failed: {e}"

    tools = ", ".join(command[0] for command in commands)
    return False, f"No clipboard tool found (tried {tools})"
