"""Credential derivation and key material helpers."""
