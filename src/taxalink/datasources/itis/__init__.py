"""Integrated Taxonomic Information System (ITIS).

Public API:
  - ids: resolve (name -> TSN)
  - vernacular: common_names
  - hierarchy: classification
"""

from taxalink.datasources.itis.hierarchy import classification
from taxalink.datasources.itis.ids import resolve
from taxalink.datasources.itis.vernacular import common_names

__all__ = ["classification", "common_names", "resolve"]
