"""Routing-table domain: module records, reconciliation and validation."""
