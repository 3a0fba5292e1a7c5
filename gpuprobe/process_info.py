"""Per-process information read from the Linux ``/proc`` filesystem."""

from __future__ import annotations

import os
import pwd
import time
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_PROC_ROOT = "/proc"

# Positions of the wanted fields in /proc/<pid>/stat, counted from the
# process state, which is the first field after the command name.
_UTIME = 11
_STIME = 12
_VSIZE = 20
_RSS = 21


@dataclass
class ProcessCpuUsage:
    """CPU time and memory use of a process at one point in time."""

    total_user_time: float
    total_kernel_time: float
    virtual_memory: int
    resident_memory: int
    timestamp: float = field(default_factory=time.monotonic)


def username_from_pid(pid: int, proc_root: str | os.PathLike[str] = DEFAULT_PROC_ROOT) -> str | None:
    """Return the name of the user owning the process, or None if unknown."""
    try:
        owner = (Path(proc_root) / str(pid)).stat().st_uid
        return pwd.getpwuid(owner).pw_name
    except (OSError, KeyError):
        return None


def command_from_pid(pid: int, proc_root: str | os.PathLike[str] = DEFAULT_PROC_ROOT) -> str | None:
    """Return the command line of the process with arguments joined by spaces."""
    try:
        data = (Path(proc_root) / str(pid) / "cmdline").read_bytes()
    except OSError:
        return None
    joined = data[:-1].replace(b"\0", b" ") + data[-1:]
    return joined.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def parse_stat_line(line: str, clock_ticks_per_second: float, page_size: int) -> ProcessCpuUsage:
    """Parse the content of ``/proc/<pid>/stat``.

    Raises ValueError when the line does not hold the expected fields.
    """
    open_paren = line.find("(")
    close_paren = line.rfind(")")
    if open_paren < 0 or close_paren < open_paren:
        raise ValueError("stat line has no command name")
    int(line[:open_paren])
    fields = line[close_paren + 1:].split()
    if len(fields) <= _RSS:
        raise ValueError("stat line has too few fields")
    user_ticks = int(fields[_UTIME])
    kernel_ticks = int(fields[_STIME])
    virtual_memory = int(fields[_VSIZE])
    resident_pages = int(fields[_RSS])
    if user_ticks < 0 or kernel_ticks < 0 or virtual_memory < 0:
        raise ValueError("stat line holds a negative unsigned field")
    return ProcessCpuUsage(
        total_user_time=user_ticks / clock_ticks_per_second,
        total_kernel_time=kernel_ticks / clock_ticks_per_second,
        virtual_memory=virtual_memory,
        resident_memory=resident_pages * page_size,
    )


def process_info(pid: int, proc_root: str | os.PathLike[str] = DEFAULT_PROC_ROOT) -> ProcessCpuUsage | None:
    """Return the CPU usage of the process, or None if it cannot be read."""
    clock_ticks = float(os.sysconf("SC_CLK_TCK"))
    page_size = os.sysconf("SC_PAGESIZE")
    timestamp = time.monotonic()
    try:
        line = (Path(proc_root) / str(pid) / "stat").read_text(errors="replace")
        usage = parse_stat_line(line, clock_ticks, page_size)
    except (OSError, ValueError):
        return None
    usage.timestamp = timestamp
    return usage