"""Writers for perception outputs: SD files and feature tables."""

import logging
import os
from pathlib import Path
from typing import Iterable, Union

import pandas as pd

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

END_OF_MOLBLOCK = "M  END\n"
END_OF_RECORD = "$$$$\n"


def sdf_path_for(xyz_path: PathLike) -> Path:
    """Output path of the SD file written next to an XYZ input."""
    return Path(xyz_path).with_suffix(".sdf")


def write_sdf(molblocks: Iterable[str], output_path: PathLike) -> Path:
    """
    Write molblocks as records of an SD file.

    Args:
        molblocks: Connection tables, each ending in a newline
        output_path: File to create or overwrite

    Returns:
        Path of the written file
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        for molblock in molblocks:
            f.write(molblock)
            f.write(END_OF_MOLBLOCK)
            f.write(END_OF_RECORD)

    logger.info(f"Wrote SD file: {path}")
    return path


def write_feature_csv(table: pd.DataFrame, output_path: PathLike) -> Path:
    """Dump a feature table, including predictions if present, to CSV."""
    path = Path(output_path)
    table.to_csv(path, index=False)
    logger.info(f"Saved feature table to {path}")
    return path
