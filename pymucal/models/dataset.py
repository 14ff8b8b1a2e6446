#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Immutable McMaster dataset

:class:`McMasterDataset` is the single source of element data for the
resolver and the cross-section engine.  It is built once (from records in
memory or by :class:`~pymucal.readers.hdf5.HDF5Reader`) and never
modified afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Iterator, Mapping
from types import MappingProxyType

from pymucal.exceptions import ValidationError
from pymucal.models.records import ElementRecord
from pymucal.utils.constants import EXCLUDED_Z, PERIODIC_TABLE, SYMBOL_TO_Z, ZMAX
from pymucal.utils.validation import (
    validate_atomic_number,
    validate_coefficients,
    validate_edges,
    validate_fit_present,
    validate_jump_ratios,
    validate_positive,
    validate_symbol,
)

logger = logging.getLogger(__name__)


def validate_record(
    record: ElementRecord,
    zmax: int = ZMAX,
    excluded: Collection[int] = EXCLUDED_Z,
) -> None:
    """Run every consistency check on a single element record

    Parameters
    ----------
    record : ElementRecord
        Record to check.
    zmax : int, optional
        Largest allowed atomic number.
    excluded : Collection[int], optional
        Atomic numbers without data.

    Raises
    ------
    ValidationError
        On the first failed check.
    """
    Z = record.Z
    validate_atomic_number(Z, zmax, excluded)
    validate_symbol(Z, record.symbol)
    validate_positive(record.atomic_weight, f"Z={Z}/atomic_weight")
    validate_positive(record.density, f"Z={Z}/density")
    validate_positive(record.conversion_factor, f"Z={Z}/conversion_factor")
    validate_edges(record.edges.as_tuple(), f"Z={Z}/edges")
    validate_jump_ratios(record.jump_ratios.as_tuple(), f"Z={Z}/jump_ratios")

    edges = record.edges
    fits = record.fits
    for label, coeffs in (
        ("K", fits.k), ("L", fits.l), ("M", fits.m), ("N", fits.n),
    ):
        validate_coefficients(coeffs, f"Z={Z}/fits/{label}")
    validate_fit_present(edges.k, fits.k, f"Z={Z}/fits/K")
    validate_fit_present(edges.l3, fits.l, f"Z={Z}/fits/L")
    validate_fit_present(edges.m, fits.m, f"Z={Z}/fits/M")

    validate_coefficients(record.scattering.coherent, f"Z={Z}/scattering/coherent")
    validate_coefficients(record.scattering.incoherent, f"Z={Z}/scattering/incoherent")

    for label, value in (("k_yield", record.k_yield), ("l_yield", record.l_yield)):
        if not 0.0 <= value <= 1.0:
            raise ValidationError(f"Z={Z}/{label} must lie in [0, 1], got {value!r}.")
    logger.debug("Record Z=%d (%s) passed validation.", Z, record.symbol)


class McMasterDataset:
    """Read-only collection of :class:`ElementRecord` keyed by Z

    The symbol index always covers every element 1 … *zmax*, including
    the excluded ones, so a caller asking for ``"Po"`` learns that the
    element exists but has no data rather than that the name is invalid.

    Parameters
    ----------
    records : Mapping[int, ElementRecord]
        Records keyed by atomic number.  May be sparse.
    zmax : int, optional
        Largest atomic number covered.
    excluded : Iterable[int], optional
        Atomic numbers with no data.
    source : str, optional
        Where the data came from, for logging and reports.

    Examples
    --------
    >>> dataset = McMasterDataset.from_records([iron])
    >>> dataset.symbol_to_z("fe")
    26
    >>> dataset.lookup_element(26).atomic_weight
    55.85
    """

    def __init__(
        self,
        records: Mapping[int, ElementRecord],
        *,
        zmax: int = ZMAX,
        excluded: Iterable[int] = EXCLUDED_Z,
        source: str = "<memory>",
    ) -> None:
        self._records = MappingProxyType(dict(records))
        self._zmax = int(zmax)
        self._excluded = frozenset(excluded)
        self._source = source
        self._symbols = {
            Z: entry["symbol"]
            for Z, entry in PERIODIC_TABLE.items()
            if Z <= self._zmax
        }
        self._index = {sym: Z for sym, Z in SYMBOL_TO_Z.items() if Z <= self._zmax}

    @classmethod
    def from_records(
        cls,
        records: Iterable[ElementRecord],
        *,
        validate: bool = True,
        zmax: int = ZMAX,
        excluded: Iterable[int] = EXCLUDED_Z,
        source: str = "<memory>",
    ) -> McMasterDataset:
        """Build a dataset from an iterable of records

        Parameters
        ----------
        records : Iterable[ElementRecord]
            One record per element.
        validate : bool, optional
            If ``True`` (default), run :func:`validate_record` on each.
        zmax, excluded, source
            Forwarded to the constructor.

        Raises
        ------
        ValidationError
            On duplicate Z, a record for an excluded Z or Z > *zmax*, or
            (with *validate*) any failed consistency check.
        """
        excluded = frozenset(excluded)
        by_z: dict[int, ElementRecord] = {}
        for record in records:
            if record.Z in by_z:
                raise ValidationError(f"Duplicate record for Z={record.Z}.")
            if record.Z in excluded or not 1 <= record.Z <= zmax:
                raise ValidationError(
                    f"Record for Z={record.Z} is outside the dataset coverage."
                )
            if validate:
                validate_record(record, zmax, excluded)
            by_z[record.Z] = record
        logger.debug("Built dataset from %s with %d records", source, len(by_z))
        return cls(by_z, zmax=zmax, excluded=excluded, source=source)

    # -- provider interface --------------------------------------------------

    @property
    def zmax(self) -> int:
        return self._zmax

    @property
    def excluded(self) -> frozenset[int]:
        return self._excluded

    @property
    def source(self) -> str:
        return self._source

    @property
    def records(self) -> Mapping[int, ElementRecord]:
        return self._records

    def lookup_element(self, Z: int) -> ElementRecord | None:
        """Return the record for *Z*, or ``None`` when there is none."""
        return self._records.get(Z)

    def symbol_to_z(self, symbol: str) -> int | None:
        """Map an element symbol to Z, ignoring case and whitespace."""
        return self._index.get(symbol.strip().lower())

    def symbol_of(self, Z: int) -> str | None:
        """Canonical symbol of *Z*, or ``None`` outside 1 … zmax."""
        return self._symbols.get(Z)

    # -- container protocol --------------------------------------------------

    def __contains__(self, Z: object) -> bool:
        return Z in self._records

    def __iter__(self) -> Iterator[ElementRecord]:
        for Z in sorted(self._records):
            yield self._records[Z]

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(source={self._source!r}, "
            f"records={len(self._records)}, zmax={self._zmax})"
        )
