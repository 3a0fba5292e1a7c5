import pytest

from gpuprobe.fdinfo import FdinfoSweeper, GpuDevice, GpuProcess, ProcessType


def make_fd(root, pid, fd, text):
    pid_dir = root / str(pid)
    (pid_dir / "fd").mkdir(parents=True, exist_ok=True)
    (pid_dir / "fdinfo").mkdir(parents=True, exist_ok=True)
    (pid_dir / "fd" / str(fd)).write_text("")
    (pid_dir / "fdinfo" / str(fd)).write_text(text)


def parse_memory(device, file, process):
    values = dict(line.split(":", 1) for line in file.read().splitlines() if ":" in line)
    if values.get("drm-driver", "").strip() != device.name:
        return False
    if "mem" in values:
        process.gpu_memory_usage = int(values["mem"])
    if "kind" in values and values["kind"].strip() == "compute":
        process.type = ProcessType.COMPUTE
    return True


def always_drm(path):
    return True


def test_merge_adds_reported_fields_only():
    target = GpuProcess(pid=1, gpu_usage=10)
    target.merge(GpuProcess(pid=1, type=ProcessType.COMPUTE, gpu_usage=5, encode_usage=3))
    assert target.gpu_usage == 15
    assert target.encode_usage == 3
    assert target.decode_usage is None
    assert target.type == ProcessType.COMPUTE


def test_merge_combines_types():
    target = GpuProcess(pid=1, type=ProcessType.GRAPHICAL)
    target.merge(GpuProcess(pid=1, type=ProcessType.COMPUTE))
    assert target.type == ProcessType.GRAPHICAL | ProcessType.COMPUTE


def test_sweep_sums_distinct_open_files(tmp_path):
    make_fd(tmp_path, 1234, 3, "drm-driver: gpu\ndrm-client-id: 1\nmem: 100\n")
    make_fd(tmp_path, 1234, 4, "drm-driver: gpu\ndrm-client-id: 2\nmem: 50\n")
    device = GpuDevice("gpu")
    sweeper = FdinfoSweeper(tmp_path, is_drm_fd=always_drm)
    sweeper.register_callback(parse_memory, device)
    sweeper.sweep()
    assert len(device.processes) == 1
    assert device.processes[0].pid == 1234
    assert device.processes[0].gpu_memory_usage == 150
    assert device.processes[0].type == ProcessType.GRAPHICAL


def test_sweep_counts_shared_client_once(tmp_path):
    make_fd(tmp_path, 77, 3, "drm-driver: gpu\ndrm-client-id: 9\nmem: 100\n")
    make_fd(tmp_path, 77, 5, "drm-driver: gpu\ndrm-client-id: 9\nmem: 100\n")
    device = GpuDevice("gpu")
    sweeper = FdinfoSweeper(tmp_path, is_drm_fd=always_drm)
    sweeper.register_callback(parse_memory, device)
    sweeper.sweep()
    assert [p.gpu_memory_usage for p in device.processes] == [100]


def test_sweep_keeps_type_from_callback(tmp_path):
    make_fd(tmp_path, 10, 3, "drm-driver: gpu\nkind: compute\n")
    device = GpuDevice("gpu")
    sweeper = FdinfoSweeper(tmp_path, is_drm_fd=always_drm)
    sweeper.register_callback(parse_memory, device)
    sweeper.sweep()
    assert device.processes[0].type == ProcessType.COMPUTE


def test_sweep_routes_to_matching_device(tmp_path):
    make_fd(tmp_path, 10, 3, "drm-driver: second\nmem: 7\n")
    make_fd(tmp_path, 11, 3, "drm-driver: first\nmem: 8\n")
    first = GpuDevice("first")
    second = GpuDevice("second")
    sweeper = FdinfoSweeper(tmp_path, is_drm_fd=always_drm)
    sweeper.register_callback(parse_memory, first)
    sweeper.register_callback(parse_memory, second)
    sweeper.sweep()
    assert [(p.pid, p.gpu_memory_usage) for p in first.processes] == [(11, 8)]
    assert [(p.pid, p.gpu_memory_usage) for p in second.processes] == [(10, 7)]


def test_sweep_ignores_unrecognised_and_non_numeric(tmp_path):
    make_fd(tmp_path, 10, 3, "drm-driver: other\n")
    (tmp_path / "self").mkdir()
    (tmp_path / "0").mkdir()
    device = GpuDevice("gpu")
    sweeper = FdinfoSweeper(tmp_path, is_drm_fd=always_drm)
    sweeper.register_callback(parse_memory, device)
    sweeper.sweep()
    assert device.processes == []


def test_default_check_rejects_regular_files(tmp_path):
    make_fd(tmp_path, 10, 3, "drm-driver: gpu\nmem: 1\n")
    device = GpuDevice("gpu")
    sweeper = FdinfoSweeper(tmp_path)
    sweeper.register_callback(parse_memory, device)
    sweeper.sweep()
    assert device.processes == []


def test_drop_callback_stops_reporting(tmp_path):
    make_fd(tmp_path, 10, 3, "drm-driver: gpu\nmem: 1\n")
    device = GpuDevice("gpu")
    sweeper = FdinfoSweeper(tmp_path, is_drm_fd=always_drm)
    sweeper.register_callback(parse_memory, device)
    sweeper.drop_callback(device)
    sweeper.sweep()
    assert device.processes == []


@pytest.mark.parametrize("missing", ["fd", "fdinfo"])
def test_process_without_fd_directories_is_skipped(tmp_path, missing):
    make_fd(tmp_path, 10, 3, "drm-driver: gpu\nmem: 1\n")
    target = tmp_path / "10" / missing
    for child in target.iterdir():
        child.unlink()
    target.rmdir()
    device = GpuDevice("gpu")
    sweeper = FdinfoSweeper(tmp_path, is_drm_fd=lambda path: path.parent.is_dir())
    sweeper.register_callback(parse_memory, device)
    sweeper.sweep()
    assert device.processes == []