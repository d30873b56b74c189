"""Exceptions raised while building a DCM table."""

from __future__ import annotations


class InconsistentTableError(ValueError):
    """The attribute, decisions and alternatives tables do not agree.

    Raised from the ``DCMTable`` constructor; no partially indexed table is
    ever returned. Callers decide whether to abort or retry with corrected
    input.
    """
