import dataclasses

import pytest

from gpuprobe.amdgpu_ids import AMDGPU_IDS, AmdgpuId, first_name, lookup_names


def test_first_entry_of_table():
    assert AMDGPU_IDS[0] == AmdgpuId(0x1309, 0x00, "AMD Radeon R7 Graphics")


def test_last_entry_of_table():
    assert AMDGPU_IDS[-1] == AmdgpuId(0x98E4, 0xEC, "AMD Radeon R4 Graphics")


def test_single_name_lookup():
    assert lookup_names(0x73BF, 0xC1) == ("AMD Radeon RX 6800 XT",)
    assert first_name(0x73BF, 0xC1) == "AMD Radeon RX 6800 XT"


def test_duplicate_keys_keep_table_order():
    assert lookup_names(0x15D8, 0x91) == (
        "AMD Radeon Vega 3 Graphics",
        "AMD Ryzen Embedded R1606G with Radeon Vega Gfx",
    )
    assert first_name(0x15D8, 0x91) == "AMD Radeon Vega 3 Graphics"


def test_duplicate_key_with_two_brands():
    assert lookup_names(0x6808, 0x00) == (
        "AMD FirePro W7000",
        "ATI FirePro V (FireGL V) Graphics Adapter",
    )


@pytest.mark.parametrize("asic_id, pci_rev_id", [(0x0000, 0x00), (0x73BF, 0xFF), (0x1309, 0x01)])
def test_unknown_device(asic_id, pci_rev_id):
    assert lookup_names(asic_id, pci_rev_id) == ()
    assert first_name(asic_id, pci_rev_id) is None


def test_revision_distinguishes_devices():
    assert first_name(0x743F, 0xC1) == "AMD Radeon RX 6500 XT"
    assert first_name(0x743F, 0xC7) == "AMD Radeon RX 6400"


def test_every_entry_is_found():
    for entry in AMDGPU_IDS:
        names = lookup_names(entry.asic_id, entry.pci_rev_id)
        assert entry.name in names
        assert first_name(entry.asic_id, entry.pci_rev_id) == names[0]


def test_lookup_counts_match_table():
    total = sum(
        len(lookup_names(a, r)) for a, r in {(e.asic_id, e.pci_rev_id) for e in AMDGPU_IDS}
    )
    assert total == len(AMDGPU_IDS)


def test_entries_are_frozen():
    entry = AmdgpuId(0x1309, 0x00, "AMD Radeon R7 Graphics")
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.name = "changed"
    assert entry.name == "AMD Radeon R7 Graphics"
    assert first_name(0x1309, 0x00) == "AMD Radeon R7 Graphics"