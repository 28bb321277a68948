"""Command-line interface for bond perception."""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from ...core.domain.exceptions import BondPerceptionError
from ...core.domain.models.config import PerceptionConfig
from ...core.services.bond_perception_service import (
    BondPerceptionService,
    evaluate_model,
)
from ...infrastructure.adapters.pickled_model_adapter import PickledModelClassifier
from ...infrastructure.repositories.xyz_repository import (
    mol_from_xyz_file,
    scan_directory,
)
from ...infrastructure.writers.sdf_writer import (
    sdf_path_for,
    write_feature_csv,
    write_sdf,
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Set up logging configuration."""
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s")


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Predict bonds of XYZ structures with a machine learned model"
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        "-f", "--filename", metavar="NAME", help="XYZ file; writes NAME.sdf"
    )
    mode.add_argument(
        "-d", "--directory", metavar="DIR", help="Process every .xyz file in DIR"
    )
    mode.add_argument(
        "--test",
        metavar="TEST_DATASET",
        help="Evaluate the model on a labelled svmlight/libsvm data set",
    )
    parser.add_argument("--model", help="Path of the pickled model")
    parser.add_argument("--config", help="JSON file with pipeline settings")
    parser.add_argument(
        "--dump-features",
        action="store_true",
        help="Also write the feature table with predictions as CSV",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def load_config(args: argparse.Namespace) -> PerceptionConfig:
    config = PerceptionConfig.from_json(args.config) if args.config else PerceptionConfig()
    if args.model:
        config.model_path = args.model
    return config


def process_file(
    service: BondPerceptionService, xyz_path: Path, dump_features: bool = False
) -> Path:
    """
    Predict the bonds of one XYZ file and write the SD file next to it.

    Returns:
        Path of the written SD file
    """
    molecule = mol_from_xyz_file(xyz_path)
    result = service.perceive(molecule)
    if dump_features:
        write_feature_csv(result.features, xyz_path.with_suffix(".csv"))
    logger.info(
        f"{xyz_path.name}: {molecule.atom_count} atoms, {result.num_bonds} bonds, "
        f"{result.num_fragments()} fragment(s)"
    )
    return write_sdf([result.molblock], sdf_path_for(xyz_path))


def process_directory(
    service: BondPerceptionService, directory: Path, dump_features: bool = False
) -> List[Path]:
    """
    Process every XYZ file in a directory.

    A failing file is logged and skipped; the rest of the batch continues.

    Returns:
        Paths of the files that could not be processed
    """
    failed = []
    paths = scan_directory(directory, "xyz")
    logger.info(f"Found {len(paths)} XYZ files in {directory}")
    for xyz_path in tqdm(paths, desc="Perceiving bonds", unit="mol"):
        try:
            process_file(service, xyz_path, dump_features)
        except (BondPerceptionError, OSError) as e:
            logger.error(f"Error processing {xyz_path}: {e}")
            failed.append(xyz_path)
    return failed


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for bond perception CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = load_config(args)
    except (OSError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    classifier = PickledModelClassifier(config.model_path)

    if args.test:
        try:
            result = evaluate_model(classifier, args.test, config.schema)
        except (BondPerceptionError, OSError, ValueError) as e:
            logger.error(f"Evaluation failed: {e}")
            return 1
        print(
            f"accuracy={result.accuracy:.4f} "
            f"({result.n_correct}/{result.n_samples} correct)"
        )
        return 0

    service = BondPerceptionService(classifier, config)

    if args.filename:
        try:
            outfile = process_file(service, Path(args.filename), args.dump_features)
        except (BondPerceptionError, OSError) as e:
            logger.error(f"Error processing {args.filename}: {e}")
            return 1
        print(f"Writing SD file: {outfile}")
        return 0

    try:
        failed = process_directory(service, Path(args.directory), args.dump_features)
    except OSError as e:
        logger.error(f"Cannot read directory {args.directory}: {e}")
        return 1
    if failed:
        logger.warning(f"{len(failed)} file(s) failed")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
