"""Ingestion layer.

This package turns configured source descriptors and raw snapshot payloads
into validated records that the aggregation engine can merge.
"""

__all__: list[str] = []
