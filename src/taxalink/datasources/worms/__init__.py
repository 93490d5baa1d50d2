"""World Register of Marine Species (WoRMS).

Public API:
  - ids: resolve (name -> AphiaID)
  - vernacular: common_names, classification
"""

from taxalink.datasources.worms.ids import resolve
from taxalink.datasources.worms.vernacular import classification, common_names

__all__ = ["classification", "common_names", "resolve"]
