"""Informational messages about what can be reported on this Linux kernel."""

from __future__ import annotations

import os
import re
from typing import Iterable

AMD_PROCESSES_MESSAGE = (
    "gpuprobe won't be able to show AMD GPU processes on your kernel version "
    "(requires Linux >= 5.14)"
)
INTEL_PROCESSES_MESSAGE = (
    "gpuprobe won't be able to show Intel GPU utilization and processes on your "
    "kernel version (requires Linux >= 5.19)"
)
INTEL_MISSING_MESSAGE = (
    "This version of gpuprobe is missing support for reporting Intel GPU memory, "
    "power, fan and temperature"
)
MSM_MISSING_MESSAGE = (
    "This version of gpuprobe is missing support for reporting MSM power, fan "
    "and temperature"
)

_RELEASE = re.compile(r"\s*\+?(\d+)\.\s*\+?(\d+)\.\s*\+?(\d+)")

KernelRelease = tuple[int, int, int]


def parse_kernel_release(release: str) -> KernelRelease:
    """Read ``major.minor.patch`` from the start of a kernel release string."""
    match = _RELEASE.match(release)
    if match is None:
        raise ValueError(f"not a kernel release: {release!r}")
    major, minor, patch = (int(group) for group in match.groups())
    return major, minor, patch


def linux_kernel_release() -> KernelRelease | None:
    """Return the running kernel's release, or None if it cannot be read."""
    try:
        return parse_kernel_release(os.uname().release)
    except (AttributeError, OSError, ValueError):
        return None


def info_messages(
    vendor_names: Iterable[str], kernel_release: KernelRelease | None
) -> list[str]:
    """Return the messages that apply to these GPU vendors on this kernel."""
    if kernel_release is None:
        return []
    vendors = set(vendor_names)
    major, minor = kernel_release[0], kernel_release[1]
    messages: list[str] = []
    if "AMD" in vendors and (major, minor) < (5, 14):
        messages.append(AMD_PROCESSES_MESSAGE)
    if "Intel" in vendors:
        if (major, minor) < (5, 19):
            messages.append(INTEL_PROCESSES_MESSAGE)
        messages.append(INTEL_MISSING_MESSAGE)
    if "msm" in vendors:
        messages.append(MSM_MISSING_MESSAGE)
    return messages