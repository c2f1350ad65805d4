"""Environment lookup, PATH splitting and program execution by name."""

import os
from typing import Dict, List, NoReturn, Optional, Sequence


def getenv(envp: Optional[Sequence[str]], var: Optional[str]) -> Optional[str]:
    """Return what follows ``var`` in the first entry of ``envp`` starting with it.

    ``var`` is a prefix such as ``"PATH="``. Gives None when nothing matches.
    """
    if envp is None or var is None:
        return None
    for entry in envp:
        if entry.startswith(var):
            return entry[len(var):]
    return None


def getpath(path: str) -> List[str]:
    """Split a ':'-separated search path into directories ending in '/'.

    Empty components are dropped.
    """
    return [directory + "/" for directory in path.split(":") if directory]


def _environment(envp: Optional[Sequence[str]]) -> Dict[str, str]:
    env = {}
    for entry in envp or ():
        key, sep, value = entry.partition("=")
        if sep:
            env.setdefault(key, value)
    return env


def execvpe(file: str, argv: Sequence[str], envp: Optional[Sequence[str]]) -> NoReturn:
    """Replace the current process with ``file``, searching PATH from ``envp``.

    A name containing '/' is run directly. Otherwise each directory of the
    PATH entry in ``envp`` is tried in order. Raises OSError when nothing
    could be run.
    """
    env = _environment(envp)
    args = list(argv)
    if "/" in file:
        os.execve(file, args, env)
        raise FileNotFoundError(f"could not execute {file!r}")
    path = getenv(envp, "PATH=")
    if path is None:
        raise FileNotFoundError(f"no PATH to search for {file!r}")
    last_error: Optional[OSError] = None
    for directory in getpath(path):
        try:
            os.execve(directory + file, args, env)
        except OSError as error:
            last_error = error
    if last_error is not None:
        raise FileNotFoundError(f"{file!r} not found in PATH") from last_error
    raise FileNotFoundError(f"{file!r} not found in PATH")