"""Catalogue of Life (via ChecklistBank).

Public API:
  - ids: resolve (name -> usage id), lookup
  - tree: downstream, classification, check_rank
"""

from taxalink.datasources.col.ids import lookup, resolve
from taxalink.datasources.col.tree import check_rank, classification, downstream

__all__ = ["check_rank", "classification", "downstream", "lookup", "resolve"]
