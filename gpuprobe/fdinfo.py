"""Collect per-process GPU usage by sweeping DRM file descriptors in ``/proc``."""

from __future__ import annotations

import enum
import io
import os
import re
import stat
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Callable, Hashable, TextIO

DRM_MAJOR = 226
DEFAULT_PROC_ROOT = "/proc"

_LEADING_DIGITS = re.compile(r"\d+")
_CLIENT_ID = re.compile(r"^drm-client-id:\s*(\S+)", re.MULTILINE)


class ProcessType(enum.Flag):
    """Kind of work a process submits to the GPU."""

    UNKNOWN = 0
    GRAPHICAL = 1
    COMPUTE = 2


_USAGE_FIELDS = (
    "gpu_memory_usage",
    "gpu_usage",
    "encode_usage",
    "decode_usage",
    "gfx_engine_used",
    "compute_engine_used",
    "enc_engine_used",
    "dec_engine_used",
)


@dataclass
class GpuProcess:
    """GPU usage of one process; a field left as None was not reported."""

    pid: int
    type: ProcessType = ProcessType.UNKNOWN
    gpu_memory_usage: int | None = None
    gpu_usage: int | None = None
    encode_usage: int | None = None
    decode_usage: int | None = None
    gfx_engine_used: int | None = None
    compute_engine_used: int | None = None
    enc_engine_used: int | None = None
    dec_engine_used: int | None = None

    def merge(self, other: GpuProcess) -> None:
        """Add the usage reported in ``other`` to this process."""
        self.type |= other.type
        for name in _USAGE_FIELDS:
            extra = getattr(other, name)
            if extra is not None:
                setattr(self, name, (getattr(self, name) or 0) + extra)


@dataclass(eq=False)
class GpuDevice:
    """A GPU and the processes found using it."""

    name: str
    processes: list[GpuProcess] = field(default_factory=list)


FdinfoCallback = Callable[[GpuDevice, TextIO, GpuProcess], bool]


@dataclass
class _CallbackEntry:
    device: GpuDevice
    callback: FdinfoCallback


def _is_drm_char_device(path: Path) -> bool:
    try:
        info = os.stat(path)
    except OSError:
        return False
    return stat.S_ISCHR(info.st_mode) and os.major(info.st_rdev) == DRM_MAJOR


def _leading_int(name: str) -> int:
    match = _LEADING_DIGITS.match(name)
    return int(match.group()) if match else 0


def _open_file_key(fdinfo_text: str) -> Hashable | None:
    """Identify the open DRM file behind an fdinfo, or None if it cannot be told."""
    match = _CLIENT_ID.search(fdinfo_text)
    return match.group(1) if match else None


def _numbered_entries(directory: Path, want_dir: bool) -> list[os.DirEntry[str]]:
    try:
        with os.scandir(directory) as entries:
            picked = [
                entry
                for entry in entries
                if entry.name[:1].isdigit()
                and (
                    entry.is_dir(follow_symlinks=False)
                    if want_dir
                    else entry.is_file(follow_symlinks=False)
                )
            ]
    except OSError:
        return []
    return sorted(picked, key=lambda entry: _leading_int(entry.name))


class FdinfoSweeper:
    """Hands each process's DRM fdinfo to the callbacks registered per device.

    Files that share a DRM client id within one process are the same open
    file and are only counted once.
    """

    def __init__(
        self,
        proc_root: str | os.PathLike[str] = DEFAULT_PROC_ROOT,
        is_drm_fd: Callable[[Path], bool] | None = None,
    ) -> None:
        self.proc_root = Path(proc_root)
        self._is_drm_fd = is_drm_fd or _is_drm_char_device
        self._entries: list[_CallbackEntry] = []

    def register_callback(self, callback: FdinfoCallback, device: GpuDevice) -> None:
        """Register a parser that recognises fdinfo files of ``device``."""
        self._entries.append(_CallbackEntry(device, callback))

    def drop_callback(self, device: GpuDevice) -> None:
        """Forget the first callback registered for ``device``."""
        for index, entry in enumerate(self._entries):
            if entry.device is device:
                del self._entries[index]
                return

    def sweep(self) -> None:
        """Scan every process and add the GPU usage found to the devices."""
        if not self._entries:
            return
        for pid_entry in _numbered_entries(self.proc_root, want_dir=True):
            pid = _leading_int(pid_entry.name)
            if pid:
                self._sweep_process(pid, Path(pid_entry.path))

    def _sweep_process(self, pid: int, pid_dir: Path) -> None:
        fd_dir = pid_dir / "fd"
        fdinfo_dir = pid_dir / "fdinfo"
        if not fd_dir.is_dir() or not fdinfo_dir.is_dir():
            return
        seen: set[Hashable] = set()
        for fdinfo_entry in _numbered_entries(fdinfo_dir, want_dir=False):
            if not self._is_drm_fd(fd_dir / fdinfo_entry.name):
                continue
            try:
                text = Path(fdinfo_entry.path).read_text(errors="replace")
            except OSError:
                continue
            key = _open_file_key(text)
            if key is not None:
                if key in seen:
                    continue
                seen.add(key)
            self._dispatch(pid, text)

    def _dispatch(self, pid: int, text: str) -> None:
        for entry in self._entries:
            found = GpuProcess(pid=pid)
            if entry.callback(entry.device, io.StringIO(text), found):
                break
        else:
            return
        if found.type == ProcessType.UNKNOWN:
            found.type = ProcessType.GRAPHICAL
        processes = entry.device.processes
        if not processes or processes[-1].pid != pid:
            processes.append(GpuProcess(pid=pid))
        processes[-1].merge(found)


__all__ = [
    "DRM_MAJOR",
    "FdinfoSweeper",
    "GpuDevice",
    "GpuProcess",
    "ProcessType",
    *(f.name for f in fields(GpuProcess) if False),
]