#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared pytest fixtures for PyMUCAL tests

Provides synthetic McMaster-like element records so the resolver, the
engine and the HDF5 round trip can be tested without a real data file.
Fit coefficients are chosen so that cross sections have closed forms,
e.g. ``[ln(2e5), -2.5]`` gives ``2e5 × E_keV^-2.5`` barns/atom.
"""

from __future__ import annotations

import math

import pytest

from pymucal.models.dataset import McMasterDataset
from pymucal.models.records import (
    EdgeEnergies,
    ElementRecord,
    EmissionLines,
    JumpRatios,
    ScatteringFits,
    ShellFits,
)
from pymucal.readers.hdf5 import derive_conversion_factor
from pymucal.utils.constants import EXCLUDED_Z, PERIODIC_TABLE, ZMAX


def power_law(amplitude: float, slope: float = -2.5) -> tuple[float, ...]:
    """Cubic McMaster fit equivalent to ``amplitude × E_keV**slope``"""
    return (math.log(amplitude), slope, 0.0, 0.0)


@pytest.fixture
def iron_record() -> ElementRecord:
    """Iron (Z=26) with round-number fits"""
    return ElementRecord(
        Z=26,
        symbol="Fe",
        atomic_weight=55.85,
        density=7.86,
        conversion_factor=92.74,
        edges=EdgeEnergies(k=7112.0, l1=846.1, l2=721.1, l3=708.1, m=91.3),
        jump_ratios=JumpRatios(l1=1.2, l2=1.4, l3=3.0),
        fits=ShellFits(
            k=power_law(2.0e5),
            l=power_law(2.0e4),
            m=power_law(2.0e3),
            n=power_law(2.0e2),
        ),
        scattering=ScatteringFits(
            coherent=power_law(10.0, -1.0),
            incoherent=power_law(5.0, 0.0),
        ),
        lines=EmissionLines(
            k_alpha1=6403.8, k_beta1=7058.0, l_alpha1=705.0, l_beta1=718.5,
        ),
        k_yield=0.347,
        l_yield=0.0063,
    )


@pytest.fixture
def hydrogen_record() -> ElementRecord:
    """Hydrogen (Z=1): K edge only, no L, M or N fits"""
    return ElementRecord(
        Z=1,
        symbol="H",
        atomic_weight=1.008,
        density=8.99e-5,
        conversion_factor=1.674,
        edges=EdgeEnergies(k=13.6),
        fits=ShellFits(k=power_law(10.0, -3.0)),
        scattering=ScatteringFits(
            coherent=power_law(0.5, -1.0),
            incoherent=power_law(0.6, 0.0),
        ),
    )


@pytest.fixture
def sample_dataset(iron_record, hydrogen_record) -> McMasterDataset:
    """Sparse dataset holding H and Fe only"""
    return McMasterDataset.from_records([hydrogen_record, iron_record], source="sample")


def synthetic_record(Z: int) -> ElementRecord:
    """Hydrogen-like record for any Z, with every shell the element has"""
    k = 13.6 * Z * Z
    l1, l2, l3 = (k / 6.0, k / 7.0, k / 7.2) if Z >= 3 else (0.0, 0.0, 0.0)
    m = k / 30.0 if Z >= 11 else 0.0
    weight = 2.0 * Z + 1.0
    return ElementRecord(
        Z=Z,
        symbol=PERIODIC_TABLE[Z]["symbol"],
        atomic_weight=weight,
        density=1.0 + Z / 10.0,
        conversion_factor=derive_conversion_factor(weight),
        edges=EdgeEnergies(k=k, l1=l1, l2=l2, l3=l3, m=m),
        jump_ratios=JumpRatios(l1=1.1, l2=1.3, l3=2.5) if Z >= 3 else JumpRatios(),
        fits=ShellFits(
            k=power_law(1.0e3 * Z),
            l=power_law(1.0e2 * Z),
            m=power_law(1.0e1 * Z),
            n=power_law(1.0 * Z),
        ),
        scattering=ScatteringFits(
            coherent=power_law(0.1 * Z, -1.0),
            incoherent=power_law(0.05 * Z, 0.0),
        ),
    )


@pytest.fixture(scope="session")
def full_dataset() -> McMasterDataset:
    """A record for every element 1 … 94 that the tables cover"""
    records = [
        synthetic_record(Z) for Z in range(1, ZMAX + 1) if Z not in EXCLUDED_Z
    ]
    return McMasterDataset.from_records(records, source="synthetic")
