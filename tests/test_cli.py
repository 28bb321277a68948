import json
import logging

import numpy as np
import pytest
from sklearn.datasets import dump_svmlight_file

from bondperception.presentation.cli.perceive_bonds import main, setup_parser

from conftest import ETHANE_XYZ, WATER_XYZ


@pytest.fixture
def water_file(tmp_path):
    path = tmp_path / "water.xyz"
    path.write_text(WATER_XYZ)
    return path


class TestPerceiveBondsCLI:
    """Tests for the command-line entry point."""

    def test_mode_is_required(self):
        with pytest.raises(SystemExit):
            setup_parser().parse_args(["--model", "xgb.model"])

    def test_modes_are_exclusive(self):
        with pytest.raises(SystemExit):
            setup_parser().parse_args(["-f", "a.xyz", "-d", "data"])

    def test_single_file(self, water_file, pickled_model):
        code = main(["-f", str(water_file), "--model", str(pickled_model)])

        assert code == 0
        sdf = water_file.with_suffix(".sdf").read_text()
        assert sdf.startswith("water\nML generated sdf\n\n")
        assert "V2000" in sdf
        assert sdf.endswith("M  END\n$$$$\n")
        assert not water_file.with_suffix(".csv").exists()

    def test_dump_features(self, water_file, pickled_model):
        main(
            ["-f", str(water_file), "--model", str(pickled_model), "--dump-features"]
        )

        header = water_file.with_suffix(".csv").read_text().splitlines()[0]
        assert header.startswith("id1,id2,q,ata,atb,distab,ata1")
        assert header.endswith(",preds")

    def test_directory_continues_after_failure(self, tmp_path, pickled_model):
        (tmp_path / "ethane.xyz").write_text(ETHANE_XYZ)
        (tmp_path / "broken.xyz").write_text("3\n\nC 0 0 0\n")

        code = main(["-d", str(tmp_path), "--model", str(pickled_model)])

        assert code == 1
        assert (tmp_path / "ethane.sdf").exists()
        assert not (tmp_path / "broken.sdf").exists()

    def test_directory_skips_undecodable_file(self, tmp_path, pickled_model):
        (tmp_path / "ethane.xyz").write_text(ETHANE_XYZ)
        (tmp_path / "bad.xyz").write_bytes(b"1\n\xff\xfe\nC 0 0 0\n")

        code = main(["-d", str(tmp_path), "--model", str(pickled_model)])

        assert code == 1
        assert (tmp_path / "ethane.sdf").exists()
        assert not (tmp_path / "bad.sdf").exists()

    def test_missing_directory(self, tmp_path, pickled_model):
        code = main(["-d", str(tmp_path / "nowhere"), "--model", str(pickled_model)])
        assert code == 1

    def test_sd_file_logged_once_written(self, water_file, pickled_model, caplog):
        with caplog.at_level(logging.INFO):
            main(["-f", str(water_file), "--model", str(pickled_model)])
        assert "Wrote SD file" in caplog.text

    def test_directory_all_succeed(self, tmp_path, pickled_model):
        (tmp_path / "ethane.xyz").write_text(ETHANE_XYZ)
        (tmp_path / "water.xyz").write_text(WATER_XYZ)

        assert main(["-d", str(tmp_path), "--model", str(pickled_model)]) == 0
        assert sorted(p.name for p in tmp_path.glob("*.sdf")) == [
            "ethane.sdf",
            "water.sdf",
        ]

    def test_missing_model(self, water_file, tmp_path):
        code = main(["-f", str(water_file), "--model", str(tmp_path / "none.model")])
        assert code == 1
        assert not water_file.with_suffix(".sdf").exists()

    def test_config_file(self, water_file, pickled_model, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"model_path": str(pickled_model)}))

        assert main(["-f", str(water_file), "--config", str(config_path)]) == 0
        assert water_file.with_suffix(".sdf").exists()

    def test_invalid_config(self, water_file, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"distance_cutoff": -1.0}))
        assert main(["-f", str(water_file), "--config", str(config_path)]) == 2

    def test_evaluation(self, tmp_path, pickled_model, capsys):
        rng = np.random.default_rng(1)
        data_path = tmp_path / "test.dat"
        dump_svmlight_file(
            rng.uniform(1.0, 2.0, size=(2, 24)), np.array([1, 0]), str(data_path)
        )

        code = main(["--test", str(data_path), "--model", str(pickled_model)])

        assert code == 0
        assert "accuracy=0.5000 (1/2 correct)" in capsys.readouterr().out
