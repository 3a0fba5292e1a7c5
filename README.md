# gpuprobe

Building blocks for a GPU activity monitor on Linux.

- `gpuprobe.amdgpu_ids`: marketing names for AMD GPUs by ASIC id and PCI revision id
  (`lookup_names`, `first_name`, `AmdgpuId`, and the full table as `AMDGPU_IDS`).
- `gpuprobe.msm_ids`: marketing names for Qualcomm Adreno GPUs by chip id
  (`chip_id`, `msm_parse_marketing_name`, and the table as `MSM_IDS`).
- `gpuprobe.info_messages`: notices about what cannot be reported for the GPU vendors found
  on the running kernel (`info_messages`, `linux_kernel_release`, `parse_kernel_release`).
- `gpuprobe.process_info`: owner, command line and CPU and memory figures of a process, read
  from `/proc` (`username_from_pid`, `command_from_pid`, `process_info`, `parse_stat_line`,
  `ProcessCpuUsage`).
- `gpuprobe.fdinfo`: walks `/proc/*/fdinfo` for DRM file descriptors and adds up the figures
  per process and device (`FdinfoSweeper`, `GpuDevice`, `GpuProcess`, `ProcessType`).

## Install

```
pip install .
```

The package needs nothing outside the standard library.

## Examples

Name a GPU:

```python
from gpuprobe.amdgpu_ids import first_name, lookup_names
from gpuprobe.msm_ids import chip_id, msm_parse_marketing_name

first_name(0x73BF, 0xC1)                     # "AMD Radeon RX 6800 XT"
lookup_names(0x15D8, 0x91)                   # both names listed for that device
msm_parse_marketing_name(chip_id(660))       # "Adreno 660"
```

Unknown devices give `None` from `first_name` and `msm_parse_marketing_name`, and an empty
tuple from `lookup_names`.

Show notices for the vendors found:

```python
from gpuprobe.info_messages import info_messages, linux_kernel_release

for message in info_messages(["AMD", "Intel"], linux_kernel_release()):
    print(message)
```

Vendor names are matched as `"AMD"`, `"Intel"` and `"msm"`. When the kernel release cannot
be read, `linux_kernel_release()` returns `None` and `info_messages` returns an empty list.
`parse_kernel_release` raises `ValueError` on a string that does not start with
`major.minor.patch`.

Inspect a process:

```python
import os
from gpuprobe.process_info import command_from_pid, process_info, username_from_pid

pid = os.getpid()
print(username_from_pid(pid), command_from_pid(pid))
print(process_info(pid))
```

Each of these returns `None` when the process cannot be read. They take an optional
`proc_root` argument (default `"/proc"`). `parse_stat_line` parses the text of
`/proc/<pid>/stat` and raises `ValueError` when the fields are missing or malformed.

Gather GPU usage per process from DRM fdinfo. Register a callback for each device. The
callback receives the device, the fdinfo text as a file object and a fresh `GpuProcess`. It
fills in the `GpuProcess` and returns `True` when the file belongs to that device. The first
callback that returns `True` wins. A process whose type is left unknown is counted as
graphical. Fdinfo files in one process that share a `drm-client-id` are counted once.

```python
from gpuprobe.fdinfo import FdinfoSweeper, GpuDevice

device = GpuDevice(name="card0")
sweeper = FdinfoSweeper()
sweeper.register_callback(my_callback, device)
sweeper.sweep()
for process in device.processes:
    print(process.pid, process.type, process.gpu_memory_usage)
```

`FdinfoSweeper` also takes `proc_root` and an `is_drm_fd` predicate, for use on a copy of
`/proc`. `drop_callback(device)` removes the first callback registered for a device.
`GpuProcess.merge` adds the usage of another `GpuProcess` into this one.

## What it does not do

gpuprobe is a library only. It has no command, no screen, and no settings file. It does not
query GPU drivers for device lists, clocks, temperatures or power. It ships no fdinfo
callbacks for particular drivers, so the caller supplies those.