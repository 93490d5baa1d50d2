"""Encyclopedia of Life (EOL).

Public API:
  - ids: resolve (name -> page id), matching_pageids
  - pages: EolPage, eol_pages, common_names, common_names_by_name
  - objects: data_objects
"""

from taxalink.datasources.eol.ids import matching_pageids, resolve
from taxalink.datasources.eol.objects import data_objects
from taxalink.datasources.eol.pages import EolPage, common_names, common_names_by_name, eol_pages

__all__ = [
    "EolPage",
    "common_names",
    "common_names_by_name",
    "data_objects",
    "eol_pages",
    "matching_pageids",
    "resolve",
]
