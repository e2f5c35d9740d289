"""
Data ingestion and record models.

Handles parsing of backend payloads into strict records, date validation,
and the output structures produced by the aggregation layer.
"""
