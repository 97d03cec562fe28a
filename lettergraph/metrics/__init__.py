"""
lettergraph.metrics — Read-only graph summaries.

Modules:
    degree — Per-node in/out degree table (pandas) and prune preview.
"""
