"""Running the directory listing command."""

from __future__ import annotations

import subprocess


def list_directory() -> int:
    """Run ``ls`` through the shell, report its exit status and return it."""
    status = subprocess.run("ls", shell=True, check=False).returncode
    print(f"this value was returned {status}")
    return status