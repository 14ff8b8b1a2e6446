#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Cross-section engine

Given a resolved atomic number and a photon energy, the engine

1. picks the shell group being ionised by comparing the energy with the
   K, L3 and M edges (highest first),
2. evaluates that shell's McMaster photo-absorption fit, dividing by the
   L1 (and L2) jump ratios when the energy lies between L sub-edges,
3. evaluates the coherent and incoherent scattering fits,
4. sums the three into the total cross section (barns/atom), and
5. scales the total by ``density / conversion_factor``.

An edge of ``0.0`` means the shell does not exist for the element; the
energy is then treated as lying below it.
"""

from __future__ import annotations

import logging

import numpy as np

from pymucal.core.fit import evaluate_fit
from pymucal.exceptions import InternalError
from pymucal.models.dataset import McMasterDataset
from pymucal.models.records import (
    ComputationResult,
    EdgeEnergies,
    ElementRecord,
    ErrorKind,
    JumpRatios,
    Shell,
)
from pymucal.utils.constants import EDGE_PROXIMITY_EV, M_EDGE_MIN_Z

logger = logging.getLogger(__name__)


def _at_or_above(energy_eV: float, edge_eV: float) -> bool:
    return edge_eV > 0.0 and energy_eV >= edge_eV


class CrossSectionEngine:
    """Compute McMaster cross sections for elements of a dataset

    Parameters
    ----------
    dataset : McMasterDataset
        Source of element records.  Never modified.

    Examples
    --------
    >>> engine = CrossSectionEngine(dataset)
    >>> result = engine.compute(26, 10000.0)
    >>> result.shell
    <Shell.K: 'K'>
    """

    def __init__(self, dataset: McMasterDataset) -> None:
        self._dataset = dataset

    # -- building blocks -----------------------------------------------------

    @staticmethod
    def select_shell(energy_eV: float, edges: EdgeEnergies) -> Shell:
        """Return the shell group whose fit applies at *energy_eV*"""
        if _at_or_above(energy_eV, edges.k):
            return Shell.K
        if _at_or_above(energy_eV, edges.l3):
            return Shell.L
        if _at_or_above(energy_eV, edges.m):
            return Shell.M1
        return Shell.N

    @staticmethod
    def l_jump_factor(
        energy_eV: float,
        edges: EdgeEnergies,
        jump_ratios: JumpRatios,
    ) -> float:
        """Divisor applied to the L fit inside the L edge complex

        Returns 1 at or above L1, the L1 jump ratio between L2 and L1, and
        the product of the L1 and L2 jump ratios between L3 and L2.  Only
        meaningful when :meth:`select_shell` returned :attr:`Shell.L`.
        """
        if _at_or_above(energy_eV, edges.l1):
            return 1.0
        if _at_or_above(energy_eV, edges.l2):
            return jump_ratios.l1
        return jump_ratios.l1 * jump_ratios.l2

    def photo_absorption(
        self,
        record: ElementRecord,
        energy_eV: float,
    ) -> tuple[Shell, float]:
        """Photo-absorption cross section (barns/atom) and the shell used

        Raises
        ------
        InternalError
            If shell selection yields a value with no matching fit.
        """
        shell = self.select_shell(energy_eV, record.edges)
        fits = record.fits

        if shell is Shell.K:
            barns = evaluate_fit(energy_eV, fits.k)
        elif shell is Shell.L:
            factor = self.l_jump_factor(energy_eV, record.edges, record.jump_ratios)
            barns = evaluate_fit(energy_eV, fits.l) / factor
        elif shell is Shell.M1:
            barns = evaluate_fit(energy_eV, fits.m)
        elif shell is Shell.N:
            barns = evaluate_fit(energy_eV, fits.n)
        else:
            raise InternalError(
                f"Shell selection for Z={record.Z} at {energy_eV} eV "
                f"produced {shell!r}."
            )
        return shell, barns

    @staticmethod
    def edge_warnings(
        record: ElementRecord,
        energy_eV: float,
        shell: Shell,
    ) -> tuple[ErrorKind, ...]:
        """Informational codes for a valid calculation"""
        found: list[ErrorKind] = []
        if any(
            edge > 0.0 and abs(energy_eV - edge) < EDGE_PROXIMITY_EV
            for edge in record.edges.as_tuple()
        ):
            found.append(ErrorKind.WITHIN_EDGE)
        if shell is Shell.M1 and record.Z < M_EDGE_MIN_Z:
            found.append(ErrorKind.M_EDGE_WARN)
        return tuple(found)

    # -- public API ----------------------------------------------------------

    def compute(self, z: int, photon_energy_eV: float) -> ComputationResult:
        """Compute all cross sections for element *z* at *photon_energy_eV*

        Parameters
        ----------
        z : int
            Atomic number, already validated by
            :class:`~pymucal.core.resolver.ElementResolver`.
        photon_energy_eV : float
            Photon energy (eV).  Zero requests the element constants only.

        Returns
        -------
        ComputationResult
            ``BAD_ENERGY`` for a zero, negative or non-finite energy (the
            energy-independent fields are still filled), ``NO_DATA`` if
            the dataset has no record for *z*, else ``NO_ERROR``.
        """
        record = self._dataset.lookup_element(z)
        if record is None:
            logger.debug("No record for Z=%s in %s", z, self._dataset.source)
            return ComputationResult(error=ErrorKind.NO_DATA)

        energy = float(photon_energy_eV)
        constants = dict(
            atomic_number=record.Z,
            atomic_weight=record.atomic_weight,
            symbol=record.symbol,
            energy_eV=energy,
            density=record.density,
            conversion_factor=record.conversion_factor,
            element=record,
        )

        if not np.isfinite(energy) or energy <= 0.0:
            logger.debug("Z=%d: energy %r gives constants only", record.Z, energy)
            return ComputationResult(error=ErrorKind.BAD_ENERGY, **constants)

        shell, photo = self.photo_absorption(record, energy)
        coherent = evaluate_fit(energy, record.scattering.coherent)
        incoherent = evaluate_fit(energy, record.scattering.incoherent)
        total = photo + coherent + incoherent
        absorption = total * record.density / record.conversion_factor

        logger.debug(
            "Z=%d E=%.6g eV shell=%s photo=%.6g coh=%.6g incoh=%.6g b/atom",
            record.Z, energy, shell.value, photo, coherent, incoherent,
        )
        return ComputationResult(
            absorption_coefficient=absorption,
            shell=shell,
            photo=photo,
            coherent=coherent,
            incoherent=incoherent,
            total=total,
            warnings=self.edge_warnings(record, energy, shell),
            **constants,
        )

    def spectrum(self, z: int, energies_eV: np.ndarray) -> np.ndarray:
        """Absorption coefficients of element *z* over an energy grid

        Parameters
        ----------
        z : int
            Atomic number.
        energies_eV : numpy.ndarray
            Photon energies (eV), any shape, all strictly positive.

        Returns
        -------
        numpy.ndarray
            ``absorption_coefficient`` for each energy, same shape.

        Raises
        ------
        ValueError
            If the dataset has no record for *z* or an energy is not
            positive.
        """
        if self._dataset.lookup_element(z) is None:
            raise ValueError(f"No McMaster data for Z={z}.")
        energies = np.asarray(energies_eV, dtype="f8")
        if np.any(~np.isfinite(energies)) or np.any(energies <= 0.0):
            raise ValueError("All energies must be finite and positive.")

        values = np.fromiter(
            (self.compute(z, e).absorption_coefficient for e in energies.ravel()),
            dtype="f8",
            count=energies.size,
        )
        return values.reshape(energies.shape)
