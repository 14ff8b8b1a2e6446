#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the ``pymucal`` command line
"""

from __future__ import annotations

import pytest

try:
    import h5py
except ImportError:
    pytest.skip("h5py not installed", allow_module_level=True)

from pymucal.cli import build_parser, main
from pymucal.converters.hdf5 import write_dataset_hdf5


@pytest.fixture
def data_file(tmp_path, sample_dataset):
    return str(write_dataset_hdf5(sample_dataset, tmp_path / "mcmaster.h5"))


class TestParser:
    def test_calc_arguments(self) -> None:
        args = build_parser().parse_args(["calc", "Fe", "10000", "--z", "26"])
        assert args.command == "calc"
        assert args.element == "Fe"
        assert args.energy == 10000.0
        assert args.z == 26

    def test_scan_defaults(self) -> None:
        args = build_parser().parse_args(["scan", "Cu", "--start", "1", "--stop", "2"])
        assert args.num == 50
        assert not args.log

    def test_no_command_prints_help(self, capsys) -> None:
        assert main([]) == 0
        assert "usage:" in capsys.readouterr().out


class TestCalc:
    def test_by_symbol(self, data_file, capsys) -> None:
        assert main(["-d", data_file, "calc", "Fe", "10000"]) == 0
        out = capsys.readouterr().out
        assert "Fe (Z=26)" in out
        assert "Shell:            K" in out
        assert "6.384555e+02" in out
        assert "WARNING" not in out

    def test_by_z(self, data_file, capsys) -> None:
        assert main(["-d", data_file, "calc", "26", "800"]) == 0
        assert "Shell:            L" in capsys.readouterr().out

    def test_warning_still_succeeds(self, data_file, capsys) -> None:
        assert main(["-d", data_file, "calc", "Fe", "7112.5"]) == 0
        assert "WARNING: mucal: 7112.5 eV is within 1 eV" in capsys.readouterr().out

    @pytest.mark.parametrize(
        "argv, text",
        [
            (["calc", "Xx", "1000"], "invalid element name"),
            (["calc", "Fe", "1000", "--z", "27"], "not consistent"),
            (["calc", "Cu", "1000"], "no McMaster data"),
            (["calc", "Fe", "0"], "constants only"),
            (["calc", "Fe", "-5"], "must be positive"),
        ],
    )
    def test_failures(self, data_file, capsys, argv, text) -> None:
        assert main(["-d", data_file, *argv]) == 1
        out = capsys.readouterr().out
        assert out.startswith("ERROR: ")
        assert text in out

    def test_numeric_element_checked_against_z(self, data_file, capsys) -> None:
        assert main(["-d", data_file, "calc", "26", "10000", "--z", "1"]) == 1
        assert "Z=1 and element name 'Fe' are not consistent" in capsys.readouterr().out

    def test_numeric_element_with_matching_z(self, data_file) -> None:
        assert main(["-d", data_file, "calc", "26", "10000", "--z", "26"]) == 0

    def test_numeric_element_beyond_table_with_z(self, data_file, capsys) -> None:
        assert main(["-d", data_file, "calc", "120", "10000", "--z", "26"]) == 1
        assert "not consistent" in capsys.readouterr().out

    def test_malformed_dataset(self, data_file, capsys) -> None:
        with h5py.File(data_file, "a") as h5f:
            h5f["elements/Z_026"].attrs["l_yield"] = "abc"
        assert main(["-d", data_file, "check"]) == 2
        assert "cannot load dataset" in capsys.readouterr().out

    def test_unreadable_dataset(self, tmp_path, capsys) -> None:
        missing = str(tmp_path / "nope.h5")
        assert main(["-d", missing, "calc", "Fe", "10000"]) == 2
        assert "cannot load dataset" in capsys.readouterr().out


class TestInfo:
    def test_constants(self, data_file, capsys) -> None:
        assert main(["-d", data_file, "info", "Fe"]) == 0
        out = capsys.readouterr().out
        assert "Iron (Fe), Z=26" in out
        assert "55.8500 g/mol" in out
        assert "7112.00" in out
        assert "6403.80" in out
        assert "K=0.3470" in out

    def test_absent_edges_dashed(self, data_file, capsys) -> None:
        assert main(["-d", data_file, "info", "1"]) == 0
        out = capsys.readouterr().out
        assert "Hydrogen (H), Z=1" in out
        assert "L1" + " " * 13 + "-" in out

    def test_unknown(self, data_file, capsys) -> None:
        assert main(["-d", data_file, "info", "Xx"]) == 1
        assert "ERROR" in capsys.readouterr().out


class TestScan:
    def test_linear(self, data_file, capsys) -> None:
        argv = ["-d", data_file, "scan", "Fe", "--start", "1000", "--stop", "10000", "--num", "4"]
        assert main(argv) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "# Fe (Z=26)"
        rows = lines[2:]
        assert len(rows) == 4
        assert rows[0].split()[:2] == ["1000.00", "L"]
        assert rows[-1].split()[:2] == ["10000.00", "K"]

    def test_log_spacing(self, data_file, capsys) -> None:
        argv = ["-d", data_file, "scan", "26", "--start", "10", "--stop", "1e5", "--num", "5", "--log"]
        assert main(argv) == 0
        rows = capsys.readouterr().out.splitlines()[2:]
        assert [r.split()[0] for r in rows] == [
            "10.00", "100.00", "1000.00", "10000.00", "100000.00",
        ]
        assert [r.split()[1] for r in rows] == ["N", "M1", "L", "K", "K"]

    def test_plot(self, data_file, tmp_path, capsys) -> None:
        pytest.importorskip("matplotlib")
        png = tmp_path / "fe.png"
        argv = [
            "-d", data_file, "scan", "Fe",
            "--start", "100", "--stop", "20000", "--num", "20", "--log", "--plot", str(png),
        ]
        assert main(argv) == 0
        assert png.stat().st_size > 0
        assert "plot written to" in capsys.readouterr().out

    def test_bad_range(self, data_file, capsys) -> None:
        argv = ["-d", data_file, "scan", "Fe", "--start", "500", "--stop", "100"]
        assert main(argv) == 1
        assert "--start" in capsys.readouterr().out

    def test_bad_element(self, data_file, capsys) -> None:
        argv = ["-d", data_file, "scan", "Po", "--start", "100", "--stop", "1000"]
        assert main(argv) == 1


class TestCheck:
    def test_report(self, data_file, capsys) -> None:
        assert main(["-d", data_file, "check"]) == 0
        out = capsys.readouterr().out
        assert "Records:  2 (Z=1..94)" in out
        assert "Excluded: Po, At, Fr, Ra, Ac, Pa, Np" in out
        assert "Missing:  He, Li" in out
