"""Ingestion layer.

Converts raw record bytes delivered by the host into models, and models
back into outgoing record bytes.
"""

__all__: list[str] = []
