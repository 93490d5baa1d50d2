"""NCBI Entrez taxonomy.

Public API:
  - ids: resolve (name -> UID)
  - taxonomy: common_names, classification
"""

from taxalink.datasources.ncbi.ids import resolve
from taxalink.datasources.ncbi.taxonomy import classification, common_names

__all__ = ["classification", "common_names", "resolve"]
