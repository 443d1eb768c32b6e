"""Adapters producing routing snapshots from chain state, compiler output and files."""
