# src/bondperception/infrastructure/repositories/xyz_repository.py
"""Repository and parsers for XYZ geometry files."""

import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, Union

import numpy as np

from ...core.domain.exceptions import StructureError
from ...core.domain.models.molecule import Molecule
from ...core.interfaces.repository import Repository

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def parse_xyz(contents: str, name: str = "", charge: int = 0) -> Molecule:
    """
    Parse the contents of an XYZ file.

    The first non-blank line holds the atom count, the next line is free
    text kept as ``Molecule.info``, and every further non-blank line is
    ``<symbol> <x> <y> <z>``. Extra columns are ignored.

    Args:
        contents: Text of the XYZ file
        name: Molecule name
        charge: Net formal charge

    Returns:
        Parsed Molecule

    Raises:
        StructureError: On a malformed count, a malformed atom record or a
            count that disagrees with the number of atom records
    """
    lines = contents.splitlines()
    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1
    if start == len(lines):
        raise StructureError("Empty XYZ input")

    try:
        natoms = int(lines[start].strip())
    except ValueError as e:
        raise StructureError(f"Invalid atom count line: {lines[start]!r}") from e

    info = lines[start + 1] if start + 1 < len(lines) else ""

    elements: List[str] = []
    coords: List[List[float]] = []
    for line_num, line in enumerate(lines[start + 2 :], start=start + 3):
        fields = line.split()
        if not fields:
            continue
        if len(fields) < 4:
            raise StructureError(f"Line {line_num}: expected '<element> <x> <y> <z>'")
        try:
            xyz = [float(v) for v in fields[1:4]]
        except ValueError as e:
            raise StructureError(f"Line {line_num}: invalid coordinate: {e}") from e
        elements.append(fields[0])
        coords.append(xyz)

    if natoms != len(elements):
        raise StructureError(
            f"Atom count line says {natoms} atoms, found {len(elements)} atom records"
        )

    return Molecule(
        elements=tuple(elements),
        coordinates=np.array(coords, dtype=np.float64).reshape(len(coords), 3),
        charge=charge,
        name=name,
        info=info,
    )


def mol_from_xyz_string(contents: str, name: str = "") -> Molecule:
    """Parse a molecule from XYZ text."""
    return parse_xyz(contents, name=name)


def mol_from_xyz_file(filename: PathLike) -> Molecule:
    """Read and parse an XYZ file; the file stem becomes the molecule name.

    Raises:
        StructureError: If the file is not UTF-8 text or is malformed
    """
    path = Path(filename)
    try:
        with open(path, "r", encoding="utf-8") as f:
            contents = f.read()
    except UnicodeDecodeError as e:
        raise StructureError(f"{path} is not a UTF-8 text file: {e}") from e
    return parse_xyz(contents, name=path.stem)


def scan_directory(path: PathLike, extension: str = "xyz") -> List[Path]:
    """Return all files in a directory with the given extension, sorted by name."""
    suffix = "." + extension.lstrip(".")
    return sorted(
        p for p in Path(path).iterdir() if p.is_file() and p.suffix == suffix
    )


class XYZRepository(Repository[Molecule]):
    """Repository for geometry files stored in one directory."""

    def __init__(self, data_dir: PathLike, extension: str = "xyz"):
        """
        Initialize repository with data directory.

        Args:
            data_dir: Directory containing geometry files
            extension: File extension of geometry files
        """
        self._data_dir = Path(data_dir)
        self._extension = extension.lstrip(".")
        self._cache: Dict[str, Molecule] = {}

    def path_for(self, id: str) -> Path:
        return self._data_dir / f"{id}.{self._extension}"

    def get(self, id: str) -> Optional[Molecule]:
        """
        Retrieve a molecule by file stem.

        Returns:
            Parsed Molecule, or None if no such file exists

        Raises:
            StructureError: If the file exists but is malformed
        """
        if id in self._cache:
            return self._cache[id]

        file_path = self.path_for(id)
        if not file_path.exists():
            return None

        molecule = mol_from_xyz_file(file_path)
        logger.debug(f"Loaded {file_path} with {molecule.atom_count} atoms")
        self._cache[id] = molecule
        return molecule

    def list_ids(self) -> List[str]:
        """List the stems of all geometry files in the directory."""
        return [p.stem for p in scan_directory(self._data_dir, self._extension)]
