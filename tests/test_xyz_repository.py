import pytest

from bondperception.core.domain.exceptions import StructureError
from bondperception.infrastructure.repositories.xyz_repository import (
    XYZRepository,
    mol_from_xyz_file,
    mol_from_xyz_string,
    scan_directory,
)

from conftest import ETHANE_XYZ, WATER_XYZ


@pytest.fixture
def xyz_dir(tmp_path):
    (tmp_path / "water.xyz").write_text(WATER_XYZ)
    (tmp_path / "ethane.xyz").write_text(ETHANE_XYZ)
    (tmp_path / "notes.txt").write_text("not a molecule")
    return tmp_path


class TestParseXYZ:
    """Tests for XYZ parsing."""

    def test_parse_xyz_string(self):
        mol_str = """2

        C          0.00000        0.00000        0.00000
        O          0.00000        0.00000        1.00000"""
        mol = mol_from_xyz_string(mol_str)
        assert mol.get_coordinates().size == 6
        assert mol.elements == ("C", "O")
        assert mol.info == ""

    def test_info_line_preserved(self):
        mol = mol_from_xyz_string(WATER_XYZ)
        assert mol.info == "water, experimental geometry"
        assert mol.atom_count == 3
        assert mol.get_coordinates()[1].tolist() == [0.757, 0.586, 0.0]

    def test_leading_blank_lines_and_extra_columns(self):
        mol = mol_from_xyz_string("\n\n1\ninfo\nNa 1.0 2.0 3.0 0.5\n")
        assert mol.elements == ("Na",)
        assert mol.info == "info"

    def test_count_mismatch(self):
        with pytest.raises(StructureError):
            mol_from_xyz_string("3\n\nC 0 0 0\nO 0 0 1\n")

    def test_invalid_count(self):
        with pytest.raises(StructureError):
            mol_from_xyz_string("two\n\nC 0 0 0\nO 0 0 1\n")

    def test_invalid_coordinate(self):
        with pytest.raises(StructureError):
            mol_from_xyz_string("1\n\nC 0.0 abc 0.0\n")

    def test_truncated_record(self):
        with pytest.raises(StructureError):
            mol_from_xyz_string("1\n\nC 0.0 0.0\n")

    def test_empty_input(self):
        with pytest.raises(StructureError):
            mol_from_xyz_string("   \n")


class TestXYZFiles:
    def test_file_stem_is_name(self, xyz_dir):
        mol = mol_from_xyz_file(xyz_dir / "ethane.xyz")
        assert mol.name == "ethane"
        assert mol.atom_count == 8

    def test_binary_file(self, tmp_path):
        path = tmp_path / "bad.xyz"
        path.write_bytes(b"1\n\xff\xfe\nC 0 0 0\n")
        with pytest.raises(StructureError):
            mol_from_xyz_file(path)

    def test_scan_directory(self, xyz_dir):
        paths = scan_directory(xyz_dir, "xyz")
        assert [p.name for p in paths] == ["ethane.xyz", "water.xyz"]
        assert scan_directory(xyz_dir, ".txt")[0].name == "notes.txt"

    def test_repository(self, xyz_dir):
        repository = XYZRepository(xyz_dir)
        assert repository.list_ids() == ["ethane", "water"]
        water = repository.get("water")
        assert water.atom_count == 3
        assert repository.get("water") is water
        assert repository.get("benzene") is None
