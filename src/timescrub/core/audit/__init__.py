"""Append-only audit trail of administrative changes."""
