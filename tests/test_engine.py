#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the cross-section engine

Reference values follow from the power-law fits in ``conftest.py``,
e.g. the iron K fit gives ``2e5 × E_keV^-2.5`` barns/atom.  They check
the arithmetic of the engine, not the physics: regression against
published McMaster reference points needs a real coefficient file,
which is not part of this repository.
"""

from __future__ import annotations

import numpy as np
import pytest

from pymucal.core.engine import CrossSectionEngine
from pymucal.exceptions import InternalError
from pymucal.models.records import EdgeEnergies, ErrorKind, JumpRatios, Shell
from pymucal.utils.constants import EXCLUDED_Z, ZMAX

SHELL_ORDER = {Shell.N: 0, Shell.M1: 1, Shell.L: 2, Shell.K: 3}

IRON_EDGES = EdgeEnergies(k=7112.0, l1=846.1, l2=721.1, l3=708.1, m=91.3)
IRON_JUMPS = JumpRatios(l1=1.2, l2=1.4, l3=3.0)


@pytest.fixture
def engine(sample_dataset) -> CrossSectionEngine:
    return CrossSectionEngine(sample_dataset)


# -----------------------------------------------------------------------
# Building blocks
# -----------------------------------------------------------------------

class TestSelectShell:
    @pytest.mark.parametrize(
        "energy, shell",
        [
            (20000.0, Shell.K),
            (7112.0, Shell.K),
            (7111.9, Shell.L),
            (708.1, Shell.L),
            (708.0, Shell.M1),
            (91.3, Shell.M1),
            (91.2, Shell.N),
            (10.0, Shell.N),
        ],
    )
    def test_iron(self, energy: float, shell: Shell) -> None:
        assert CrossSectionEngine.select_shell(energy, IRON_EDGES) is shell

    def test_absent_edges_never_selected(self) -> None:
        edges = EdgeEnergies(k=13.6)
        assert CrossSectionEngine.select_shell(1.0, edges) is Shell.N
        assert CrossSectionEngine.select_shell(13.6, edges) is Shell.K

    def test_no_edges(self) -> None:
        assert CrossSectionEngine.select_shell(1.0e6, EdgeEnergies()) is Shell.N


class TestLJumpFactor:
    @pytest.mark.parametrize(
        "energy, factor",
        [
            (900.0, 1.0),
            (846.1, 1.0),
            (846.0, 1.2),
            (721.1, 1.2),
            (721.0, 1.2 * 1.4),
            (708.1, 1.2 * 1.4),
        ],
    )
    def test_iron_boundaries(self, energy: float, factor: float) -> None:
        got = CrossSectionEngine.l_jump_factor(energy, IRON_EDGES, IRON_JUMPS)
        assert got == pytest.approx(factor)

    def test_l3_ratio_is_not_applied(self) -> None:
        jumps = JumpRatios(l1=1.0, l2=1.0, l3=50.0)
        assert CrossSectionEngine.l_jump_factor(710.0, IRON_EDGES, jumps) == 1.0


# -----------------------------------------------------------------------
# compute()
# -----------------------------------------------------------------------

class TestComputeIron:
    """Test Fe against closed-form values"""

    def test_k_shell(self, engine: CrossSectionEngine) -> None:
        res = engine.compute(26, 10000.0)
        assert res.error is ErrorKind.NO_ERROR
        assert res.shell is Shell.K
        assert res.photo == pytest.approx(632.455532033676, rel=1e-12)
        assert res.coherent == pytest.approx(1.0)
        assert res.incoherent == pytest.approx(5.0)
        assert res.total == pytest.approx(638.455532033676, rel=1e-12)
        assert res.absorption_coefficient == pytest.approx(54.1110683824099, rel=1e-12)
        assert res.mass_absorption_coefficient == pytest.approx(6.88435984509032, rel=1e-12)
        assert res.warnings == ()

    def test_constants_copied(self, engine: CrossSectionEngine, iron_record) -> None:
        res = engine.compute(26, 10000.0)
        assert res.atomic_number == 26
        assert res.symbol == "Fe"
        assert res.atomic_weight == 55.85
        assert res.density == 7.86
        assert res.conversion_factor == 92.74
        assert res.energy_eV == 10000.0
        assert res.element is iron_record

    @pytest.mark.parametrize(
        "energy, photo",
        [
            (900.0, 26026.9766269002),
            (800.0, 29115.4684570285),
            (715.0, 27539.4719960265),
        ],
    )
    def test_l_shell_with_jumps(
        self, engine: CrossSectionEngine, energy: float, photo: float,
    ) -> None:
        res = engine.compute(26, energy)
        assert res.shell is Shell.L
        assert res.photo == pytest.approx(photo, rel=1e-12)

    def test_m_shell(self, engine: CrossSectionEngine) -> None:
        res = engine.compute(26, 100.0)
        assert res.shell is Shell.M1
        assert res.photo == pytest.approx(632455.532033676, rel=1e-12)

    def test_n_shell(self, engine: CrossSectionEngine) -> None:
        res = engine.compute(26, 50.0)
        assert res.shell is Shell.N
        assert res.photo == pytest.approx(357770.876399966, rel=1e-12)
        assert res.coherent == pytest.approx(200.0)
        assert res.total == pytest.approx(357975.876399966, rel=1e-12)

    @pytest.mark.parametrize("energy", [50.0, 100.0, 715.0, 800.0, 5000.0, 1.0e5])
    def test_algebraic_identities(self, engine: CrossSectionEngine, energy: float) -> None:
        res = engine.compute(26, energy)
        assert res.total == pytest.approx(res.photo + res.coherent + res.incoherent)
        assert res.absorption_coefficient == pytest.approx(
            res.total * res.density / res.conversion_factor
        )


class TestComputeEnergyHandling:
    def test_zero_energy_gives_constants(self, engine: CrossSectionEngine) -> None:
        res = engine.compute(26, 0.0)
        assert res.error is ErrorKind.BAD_ENERGY
        assert res.is_constants_only
        assert res.atomic_weight == 55.85
        assert res.element is not None
        assert res.element.edges.k == 7112.0
        assert res.total == 0.0
        assert res.shell is None

    @pytest.mark.parametrize("energy", [-1.0, -1.0e4, float("nan"), float("inf")])
    def test_invalid_energy(self, engine: CrossSectionEngine, energy: float) -> None:
        res = engine.compute(26, energy)
        assert res.error is ErrorKind.BAD_ENERGY
        assert not res.is_constants_only
        assert res.atomic_number == 26
        assert res.atomic_weight == 55.85
        assert res.absorption_coefficient == 0.0

    def test_missing_record(self, engine: CrossSectionEngine) -> None:
        res = engine.compute(29, 10000.0)
        assert res.error is ErrorKind.NO_DATA
        assert res.atomic_number == 0


class TestComputeWarnings:
    @pytest.mark.parametrize("energy", [7112.5, 7111.5, 846.5, 91.0])
    def test_within_edge(self, engine: CrossSectionEngine, energy: float) -> None:
        res = engine.compute(26, energy)
        assert res.error is ErrorKind.NO_ERROR
        assert ErrorKind.WITHIN_EDGE in res.warnings
        assert res.total > 0.0

    def test_not_within_edge(self, engine: CrossSectionEngine) -> None:
        assert engine.compute(26, 7114.0).warnings == ()

    def test_m_edge_warning_below_z30(self, engine: CrossSectionEngine) -> None:
        res = engine.compute(26, 100.0)
        assert res.error is ErrorKind.NO_ERROR
        assert res.warnings == (ErrorKind.M_EDGE_WARN,)

    def test_no_m_edge_warning_from_z30(self, full_dataset) -> None:
        engine = CrossSectionEngine(full_dataset)
        m_edge = full_dataset.lookup_element(30).edges.m
        res = engine.compute(30, m_edge * 1.05)
        assert res.shell is Shell.M1
        assert ErrorKind.M_EDGE_WARN not in res.warnings

    def test_hydrogen_without_l_and_m(self, engine: CrossSectionEngine) -> None:
        res = engine.compute(1, 10.0)
        assert res.shell is Shell.N
        assert res.photo == 0.0
        assert res.total == pytest.approx(res.coherent + res.incoherent)


class TestComputeAllElements:
    """Test invariants over every element of the synthetic table"""

    @pytest.mark.parametrize(
        "Z", [Z for Z in range(1, ZMAX + 1) if Z not in EXCLUDED_Z],
    )
    def test_shell_order_is_monotonic(self, full_dataset, Z: int) -> None:
        engine = CrossSectionEngine(full_dataset)
        ranks = [
            SHELL_ORDER[engine.compute(Z, e).shell]
            for e in np.geomspace(1.0, 2.0e5, 400)
        ]
        assert ranks == sorted(ranks)
        assert ranks[-1] == SHELL_ORDER[Shell.K]

    @pytest.mark.parametrize("Z", [1, 13, 29, 47, 79, 92, 94])
    def test_results_positive_and_finite(self, full_dataset, Z: int) -> None:
        engine = CrossSectionEngine(full_dataset)
        for e in np.geomspace(10.0, 1.0e5, 50):
            res = engine.compute(Z, float(e))
            assert res.ok
            assert np.isfinite(res.total) and res.total > 0.0
            assert res.absorption_coefficient > 0.0


class TestPhotoAbsorption:
    def test_unexpected_shell_raises(self, engine, iron_record, monkeypatch) -> None:
        monkeypatch.setattr(
            CrossSectionEngine, "select_shell", staticmethod(lambda e, edges: None),
        )
        with pytest.raises(InternalError) as excinfo:
            engine.photo_absorption(iron_record, 10000.0)
        assert excinfo.value.kind is ErrorKind.INTERNAL_ERROR


class TestSpectrum:
    def test_matches_compute(self, engine: CrossSectionEngine) -> None:
        energies = np.array([50.0, 100.0, 800.0, 10000.0])
        mu = engine.spectrum(26, energies)
        expected = [engine.compute(26, e).absorption_coefficient for e in energies]
        np.testing.assert_allclose(mu, expected)

    def test_preserves_shape(self, engine: CrossSectionEngine) -> None:
        energies = np.geomspace(100.0, 1.0e4, 6).reshape(2, 3)
        assert engine.spectrum(26, energies).shape == (2, 3)

    def test_rejects_non_positive(self, engine: CrossSectionEngine) -> None:
        with pytest.raises(ValueError, match="positive"):
            engine.spectrum(26, np.array([100.0, 0.0]))

    def test_rejects_missing_element(self, engine: CrossSectionEngine) -> None:
        with pytest.raises(ValueError, match="Z=29"):
            engine.spectrum(29, np.array([100.0]))
