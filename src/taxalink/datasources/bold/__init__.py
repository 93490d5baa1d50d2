"""Barcode of Life Data Systems (BOLD) taxonomy.

Public API:
  - ids: resolve (name -> taxid)
  - taxa: search_name, search_id, name_frame, id_frame
"""

from taxalink.datasources.bold.ids import resolve
from taxalink.datasources.bold.taxa import id_frame, name_frame, search_id, search_name

__all__ = ["id_frame", "name_frame", "resolve", "search_id", "search_name"]
