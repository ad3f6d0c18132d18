import os
import platform
import shlex
import subprocess


def subprocess_kwargs() -> dict:
    """
    Returns a dictionary of keyword arguments for subprocess calls, adding platform-specific
    flags that we want to use consistently.
    """
    kwargs = {}
    if platform.system() == "Windows":
        kwargs["creationflags"] = subprocess.CREATE_NO_WINDOW  # type: ignore
    return kwargs


def split_command(command: str) -> list[str]:
    """Split a configured command string (e.g. ``python -m bpmncode``) into argv."""
    return shlex.split(command, posix=os.name != "nt")


def quote_arg(arg: str) -> str:
    """Safely quote a single argument for shell command strings."""
    return shlex.quote(arg)


def format_command(argv: list[str]) -> str:
    """Render argv as a copy-pasteable shell command for logs."""
    return " ".join(quote_arg(a) for a in argv)
