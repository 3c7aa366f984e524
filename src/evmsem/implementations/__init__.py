"""Candidate implementations checked against the reference semantics."""
