#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Element resolution

Turns a user-supplied element symbol and/or atomic-number hint into a
validated atomic number.  Failures are returned as
:class:`~pymucal.models.records.ErrorKind` codes on the
:class:`~pymucal.models.records.Resolution`, never raised.
"""

from __future__ import annotations

import logging

from pymucal.models.dataset import McMasterDataset
from pymucal.models.records import ErrorKind, Resolution

logger = logging.getLogger(__name__)


class ElementResolver:
    """Resolve element identifiers against a :class:`McMasterDataset`

    Rules are applied in order and the first failure wins:

    1. no symbol and no (or zero) Z → ``NO_INPUT``
    2. negative Z → ``BAD_Z``
    3. symbol and non-zero Z that disagree → ``NO_ZMATCH``
    4. Po, At, Fr, Ra, Ac, Pa or Np → ``NO_DATA``
    5. Z above ``zmax`` → ``NO_DATA``
    6. unknown symbol → ``BAD_NAME``
    7. no record in the dataset → ``NO_DATA``

    Examples
    --------
    >>> resolver = ElementResolver(dataset)
    >>> resolver.resolve("fe", 26)
    Resolution(Z=26, symbol='Fe', error=<ErrorKind.NO_ERROR: 0>)
    >>> resolver.resolve("Fe", 27).error
    <ErrorKind.NO_ZMATCH: -2>
    """

    def __init__(self, dataset: McMasterDataset) -> None:
        self._dataset = dataset

    def resolve(
        self,
        symbol: str | None = None,
        z_hint: int | None = None,
    ) -> Resolution:
        """Resolve *symbol* and/or *z_hint* to an atomic number

        Parameters
        ----------
        symbol : str | None
            Element symbol, any case.  ``None`` or blank means "not given".
        z_hint : int | None
            Atomic number.  ``None`` or 0 means "not given".

        Returns
        -------
        Resolution
            ``Z`` and canonical ``symbol`` on success, otherwise a zeroed
            resolution carrying the failure code.
        """
        name = (symbol or "").strip()
        hint = int(z_hint or 0)

        if not name and hint == 0:
            return self._fail(ErrorKind.NO_INPUT, symbol, z_hint)
        if hint < 0:
            return self._fail(ErrorKind.BAD_Z, symbol, z_hint)

        if name:
            Z = self._dataset.symbol_to_z(name) or 0
            if hint > 0 and Z != hint:
                return self._fail(ErrorKind.NO_ZMATCH, symbol, z_hint)
        else:
            Z = hint

        if Z in self._dataset.excluded:
            return self._fail(ErrorKind.NO_DATA, symbol, z_hint)
        if Z > self._dataset.zmax:
            return self._fail(ErrorKind.NO_DATA, symbol, z_hint)
        if Z == 0:
            return self._fail(ErrorKind.BAD_NAME, symbol, z_hint)
        if self._dataset.lookup_element(Z) is None:
            return self._fail(ErrorKind.NO_DATA, symbol, z_hint)

        canonical = self._dataset.symbol_of(Z) or ""
        logger.debug("Resolved (%r, %r) to Z=%d (%s)", symbol, z_hint, Z, canonical)
        return Resolution(Z=Z, symbol=canonical)

    @staticmethod
    def _fail(kind: ErrorKind, symbol: str | None, z_hint: int | None) -> Resolution:
        logger.debug("Resolution of (%r, %r) failed: %s", symbol, z_hint, kind.name)
        return Resolution(error=kind)
