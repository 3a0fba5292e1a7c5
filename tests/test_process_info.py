import os
import pwd

import pytest

from gpuprobe.process_info import (
    ProcessCpuUsage,
    command_from_pid,
    parse_stat_line,
    process_info,
    username_from_pid,
)

STAT_LINE = (
    "1234 (my prog) S 1 1234 1234 0 -1 4194304 100 0 0 0 250 50 0 0 20 0 1 0 "
    "12345 10485760 256 18446744073709551615 1 1 0 0 0 0 0 0 0 0 0 17 3 0 0 0 0 0"
)


def test_parse_stat_line_reads_times_and_memory():
    usage = parse_stat_line(STAT_LINE, 100.0, 4096)
    assert usage.total_user_time == pytest.approx(250 / 100)
    assert usage.total_kernel_time == pytest.approx(50 / 100)
    assert usage.virtual_memory == 10485760
    assert usage.resident_memory == 256 * 4096


def test_parse_stat_line_handles_parenthesis_in_command_name():
    line = STAT_LINE.replace("(my prog)", "(odd) name)")
    usage = parse_stat_line(line, 100.0, 4096)
    assert usage.virtual_memory == 10485760


@pytest.mark.parametrize(
    "line",
    ["", "1234 my prog S 1", "1234 (x) S 1 2 3", "abc (x) " + " ".join(["1"] * 30)],
)
def test_parse_stat_line_rejects_malformed(line):
    with pytest.raises(ValueError):
        parse_stat_line(line, 100.0, 4096)


def test_command_from_pid_joins_arguments(tmp_path):
    (tmp_path / "42").mkdir()
    (tmp_path / "42" / "cmdline").write_bytes(b"python\0-m\0tool\0")
    assert command_from_pid(42, tmp_path) == "python -m tool"


def test_command_from_pid_empty_cmdline(tmp_path):
    (tmp_path / "42").mkdir()
    (tmp_path / "42" / "cmdline").write_bytes(b"")
    assert command_from_pid(42, tmp_path) == ""


def test_command_from_pid_missing_process(tmp_path):
    assert command_from_pid(99, tmp_path) is None


def test_username_from_pid_uses_directory_owner(tmp_path):
    (tmp_path / "42").mkdir()
    expected = pwd.getpwuid(os.stat(tmp_path / "42").st_uid).pw_name
    assert username_from_pid(42, tmp_path) == expected


def test_username_from_pid_missing_process(tmp_path):
    assert username_from_pid(7, tmp_path) is None


def test_process_info_reads_stat_file(tmp_path):
    (tmp_path / "1234").mkdir()
    (tmp_path / "1234" / "stat").write_text(STAT_LINE + "\n")
    usage = process_info(1234, tmp_path)
    assert isinstance(usage, ProcessCpuUsage)
    assert usage.virtual_memory == 10485760
    assert usage.resident_memory == 256 * os.sysconf("SC_PAGESIZE")
    assert usage.total_user_time == pytest.approx(250 / os.sysconf("SC_CLK_TCK"))


def test_process_info_missing_or_malformed(tmp_path):
    assert process_info(5, tmp_path) is None
    (tmp_path / "6").mkdir()
    (tmp_path / "6" / "stat").write_text("garbage")
    assert process_info(6, tmp_path) is None