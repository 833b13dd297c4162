"""CLI Commands"""

import os
import sys

from commitgen.config import API_KEY_ENV, Config, get_config_path
from commitgen.llm import GeminiClient
from commitgen.output import bold, dim, info, success, warning


def display_config(config: Config) -> int:
    """Display current configuration."""
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .gcmrc found)")

    overrides = {k: os.environ[k] for k in ('GCM_MODEL', 'GCM_STYLE', 'GCM_TIMEOUT') if os.environ.get(k)}
    if overrides:
        print(f"  {dim('Environment overrides:')}")
        for key, value in overrides.items():
            print(f"    {key}={value}")

    key_state = success('set') if os.environ.get(API_KEY_ENV) else warning('missing')
    print(f"  {dim(API_KEY_ENV + ':')} {key_state}")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    model:              {info(config.model or GeminiClient.DEFAULT_MODEL)}")
    print(f"    style:              {info(config.style)}")
    print(f"    include_body:       {info(str(config.include_body).lower())}")
    print(f"    max_subject_length: {info(str(config.max_subject_length))}")
    print(f"    timeout:            {info(f'{config.timeout:g}s')}")
    print(f"    temperature:        {info(f'{config.temperature:g}')}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  .gcmrc (in current directory)")
    print(f"    Global: ~/.gcmrc\n")

    return 0


def run_install_completion() -> int:
    """Install shell tab completion."""
    shell = os.environ.get('SHELL', '')
    line = 'eval "$(register-python-argcomplete gcm)"'

    print(f"\n{bold('Tab Completion Setup')}\n")

    if 'zsh' in shell or 'bash' in shell:
        rc_file = os.path.expanduser('~/.zshrc' if 'zsh' in shell else '~/.bashrc')
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ' + rc_file)}")
    elif sys.platform == 'win32':
        print("For PowerShell, add to your $PROFILE:\n")
        print("  register-python-argcomplete --shell powershell gcm | Out-String | Invoke-Expression")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print(f"  {line}\n")
        print(f"  {dim('# Fish')}")
        print("  register-python-argcomplete --shell fish gcm | source")

    print(f"\n{dim('After setup, press TAB to autocomplete flags and styles.')}")
    return 0
