#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Abstract base class for McMaster dataset readers

Every concrete reader inherits from :class:`BaseReader` and implements
:meth:`read`, which returns a :class:`~pymucal.models.dataset.McMasterDataset`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from pymucal.models.dataset import McMasterDataset


class BaseReader(ABC):
    """Abstract base for McMaster dataset readers

    Subclasses must override :meth:`read` to open a specific file
    format, build :class:`~pymucal.models.records.ElementRecord` objects
    and hand them to :meth:`McMasterDataset.from_records`, which performs
    validation when asked to.

    Notes
    -----
    Readers never write files; that is the converter layer's job::

        utils ← models ← readers ← converters
    """

    @abstractmethod
    def read(
        self,
        path: Path | str,
        *,
        validate: bool = True,
    ) -> McMasterDataset:
        """Load a McMaster dataset from *path*

        Parameters
        ----------
        path : Path | str
            Filesystem path to the dataset file.
        validate : bool, optional
            If ``True`` (default), check every record for physical
            consistency.

        Returns
        -------
        McMasterDataset
            The loaded, immutable dataset.

        Raises
        ------
        FileFormatError
            If the file is missing or of the wrong type.
        ParseError
            If the file content is malformed.
        ValidationError
            If *validate* is ``True`` and a record fails a check.
        """
        ...
