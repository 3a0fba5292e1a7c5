import pytest

from gpuprobe.msm_ids import MSM_IDS, chip_id, msm_parse_marketing_name


def test_chip_id_encoding_of_a_known_core():
    assert chip_id(640) == 0x06040000


def test_chip_id_leaves_low_byte_clear():
    assert chip_id(740) & 0xFF == 0


@pytest.mark.parametrize(
    "core, name",
    [
        (200, "Adreno 200"),
        (205, "Adreno 205"),
        (307, "Adreno 307"),
        (512, "Adreno 512"),
        (630, "Adreno 630"),
        (690, "Adreno 690"),
        (740, "Adreno 740"),
    ],
)
def test_lookup_by_core_number(core, name):
    assert msm_parse_marketing_name(chip_id(core)) == name


@pytest.mark.parametrize(
    "gpu_id, name",
    [
        (0x00BE06030500, "Adreno 8c Gen 3"),
        (0x007506030500, "Adreno 7c+ Gen 3"),
        (0x006006030500, "Adreno 7c+ Gen 3 Lite"),
    ],
)
def test_lookup_of_misc_ids(gpu_id, name):
    assert msm_parse_marketing_name(gpu_id) == name


def test_unknown_core_is_none():
    assert msm_parse_marketing_name(chip_id(999)) is None


def test_unknown_raw_id_is_none():
    assert msm_parse_marketing_name(0) is None


def test_distinct_cores_give_distinct_ids():
    ids = [chip_id(core) for core in (200, 201, 205, 220, 305, 640, 740)]
    assert len(set(ids)) == len(ids)


def test_table_names_all_start_with_adreno():
    assert all(name.startswith("Adreno ") for name in MSM_IDS.values())