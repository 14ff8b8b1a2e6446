#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
HDF5 reader for McMaster datasets

Loads the layout written by :func:`~pymucal.converters.hdf5.write_dataset_hdf5`
into an immutable :class:`~pymucal.models.dataset.McMasterDataset`.

HDF5 Layout
-----------
::

    /metadata/
        zmax                int64
        excluded            int64[]
        source              string

    /elements/
        Z_{ZZZ}/            attrs: Z, symbol, atomic_weight, density,
                                   conversion_factor (optional),
                                   k_yield, l_yield (optional)
            edges           float64[5]   K, L1, L2, L3, M    units: eV
            jump_ratios     float64[3]   L1, L2, L3          (optional)
            emission_lines  float64[4]   Ka1, Kb1, La1, Lb1  (optional)
            fits/
                K, L, M, N          float64[n]           (optional)
            scattering/
                coherent, incoherent float64[n]          (optional)

A missing ``conversion_factor`` is derived from the atomic weight with
:func:`derive_conversion_factor`.
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

try:
    import h5py
except ImportError as _exc:  # pragma: no cover
    raise ImportError(
        "The 'h5py' package is required by HDF5Reader.  "
        "Install it with: pip install h5py"
    ) from _exc

from pymucal.exceptions import FileFormatError, ParseError
from pymucal.models.dataset import McMasterDataset
from pymucal.models.records import (
    EdgeEnergies,
    ElementRecord,
    EmissionLines,
    JumpRatios,
    ScatteringFits,
    ShellFits,
)
from pymucal.readers.base import BaseReader
from pymucal.utils.constants import (
    AVOGADRO,
    BARN_TO_CM2,
    EDGE_LABELS,
    EXCLUDED_Z,
    FIT_LABELS,
    JUMP_LABELS,
    LINE_LABELS,
    SCATTERING_LABELS,
    ZMAX,
)

logger = logging.getLogger(__name__)


def derive_conversion_factor(atomic_weight: float) -> float:
    """Barns/atom per cm²/g for an element of the given atomic weight

    Examples
    --------
    >>> round(derive_conversion_factor(55.85), 2)
    92.74
    """
    return atomic_weight / (AVOGADRO * BARN_TO_CM2)


def _as_str(value) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


def _read_vector(
    grp: h5py.Group,
    name: str,
    size: int | None = None,
    default: tuple[float, ...] | None = None,
) -> tuple[float, ...]:
    """Read a 1-D float dataset as a tuple, checking its length."""
    obj = grp.get(name)
    if obj is None:
        if default is None:
            raise ParseError(f"{grp.name}: missing dataset '{name}'.")
        return default
    if not isinstance(obj, h5py.Dataset):
        raise ParseError(f"{grp.name}/{name} is not a dataset.")
    try:
        arr = np.asarray(obj[()], dtype="f8")
    except (TypeError, ValueError) as exc:
        raise ParseError(f"{obj.name}: non-numeric data ({exc}).") from exc
    if arr.ndim != 1 or (size is not None and arr.size != size):
        expected = f"({size},)" if size is not None else "1-D"
        raise ParseError(f"{obj.name}: expected shape {expected}, got {arr.shape}.")
    return tuple(float(x) for x in arr)


class HDF5Reader(BaseReader):
    """Reader for McMaster datasets stored in HDF5

    Examples
    --------
    >>> dataset = HDF5Reader().read("mcmaster.h5")
    >>> dataset.lookup_element(26).symbol
    'Fe'
    """

    def read(
        self,
        path: Path | str,
        *,
        validate: bool = True,
    ) -> McMasterDataset:
        """Load a McMaster dataset from an HDF5 file

        Parameters
        ----------
        path : Path | str
            Path to the HDF5 file.
        validate : bool, optional
            Run record validation.  Default ``True``.

        Returns
        -------
        McMasterDataset
            Fully populated dataset.

        Raises
        ------
        FileFormatError
            If the file is missing or is not HDF5.
        ParseError
            If groups, attributes or arrays are missing or malformed.
        ValidationError
            If *validate* is ``True`` and a record fails a check.
        """
        filepath = Path(path)
        logger.debug("Opening McMaster HDF5 file: %s", filepath)

        if not filepath.is_file():
            raise FileFormatError(f"Dataset file not found: {filepath}")

        try:
            h5f = h5py.File(str(filepath), "r")
        except OSError as exc:
            raise FileFormatError(
                f"Failed to open {filepath} as HDF5: {exc}"
            ) from exc

        with h5f:
            zmax, excluded = self._read_metadata(h5f)
            elements = h5f.get("elements")
            if not isinstance(elements, h5py.Group):
                raise ParseError(f"{filepath}: missing '/elements' group.")
            records = [self._read_element(elements[name]) for name in sorted(elements)]

        dataset = McMasterDataset.from_records(
            records,
            validate=validate,
            zmax=zmax,
            excluded=excluded,
            source=str(filepath),
        )
        logger.debug("Loaded %d element records from %s", len(dataset), filepath)
        return dataset

    @staticmethod
    def _read_metadata(h5f: h5py.File) -> tuple[int, frozenset[int]]:
        meta = h5f.get("metadata")
        if meta is None:
            logger.warning("No /metadata group in %s, using defaults", h5f.filename)
            return ZMAX, EXCLUDED_Z
        try:
            zmax = int(meta["zmax"][()]) if "zmax" in meta else ZMAX
            excluded = (
                frozenset(int(z) for z in meta["excluded"][()])
                if "excluded" in meta
                else EXCLUDED_Z
            )
        except (TypeError, ValueError) as exc:
            raise ParseError(f"{h5f.filename}: malformed /metadata ({exc}).") from exc
        return zmax, excluded

    @staticmethod
    def _read_element(grp: h5py.Group) -> ElementRecord:
        if not isinstance(grp, h5py.Group):
            raise ParseError(f"{grp.name} is not a group.")

        attrs = grp.attrs
        try:
            Z = int(attrs["Z"])
            symbol = _as_str(attrs["symbol"])
            atomic_weight = float(attrs["atomic_weight"])
            density = float(attrs["density"])
            if "conversion_factor" in attrs:
                conversion_factor = float(attrs["conversion_factor"])
            else:
                conversion_factor = derive_conversion_factor(atomic_weight)
            k_yield = float(attrs.get("k_yield", 0.0))
            l_yield = float(attrs.get("l_yield", 0.0))
        except KeyError as exc:
            raise ParseError(f"{grp.name}: missing attribute {exc}.") from exc
        except (TypeError, ValueError) as exc:
            raise ParseError(f"{grp.name}: malformed attribute ({exc}).") from exc

        edges = _read_vector(grp, "edges", len(EDGE_LABELS))
        jumps = _read_vector(
            grp, "jump_ratios", len(JUMP_LABELS), default=(1.0,) * len(JUMP_LABELS),
        )
        lines = _read_vector(
            grp, "emission_lines", len(LINE_LABELS), default=(0.0,) * len(LINE_LABELS),
        )
        fits = [_read_vector(grp, f"fits/{label}", default=()) for label in FIT_LABELS]
        scattering = [
            _read_vector(grp, f"scattering/{label}", default=())
            for label in SCATTERING_LABELS
        ]

        logger.debug("  %s: Z=%d (%s), K edge %.6g eV", grp.name, Z, symbol, edges[0])
        return ElementRecord(
            Z=Z,
            symbol=symbol,
            atomic_weight=atomic_weight,
            density=density,
            conversion_factor=conversion_factor,
            edges=EdgeEnergies(*edges),
            jump_ratios=JumpRatios(*jumps),
            fits=ShellFits(*fits),
            scattering=ScatteringFits(*scattering),
            lines=EmissionLines(*lines),
            k_yield=k_yield,
            l_yield=l_yield,
        )


def load_dataset(path: Path | str, *, validate: bool = True) -> McMasterDataset:
    """Convenience wrapper around :meth:`HDF5Reader.read`"""
    return HDF5Reader().read(path, validate=validate)
