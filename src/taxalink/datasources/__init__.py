"""External taxonomic data sources.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # URLs and the rate-limited GET helpers
    ├── ids.py            # Identifier resolver: name -> TaxonId | None
    └── {feature}.py      # Adapters (one per endpoint/concept)

Adding a new datasource
-----------------------
1. Add a member to :class:`taxalink.schemas.Source` and a base URL to
   :class:`taxalink.config.Settings`.

2. Create ``datasources/{name}/`` with the files above. Adapters take a
   ``TaxonId | None`` and return records via
   :func:`taxalink.normalize.normalize`::

       def common_names(identifier, simplify=True, *, settings, request_options=None):
           if identifier is None:
               return None
           require_source(identifier, Source.MINE)
           data = client.get_json(f"names/{identifier.value}", settings=settings)
           records = parse_records(Source.MINE, MyRecord, data.get("names", []))
           return normalize(records, MyRecord, simplify)

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Register the resolver/adapter pair in the dispatch tables in
   ``taxalink/dispatch.py``.

5. Add tests in ``tests/test_{name}.py``.
"""
