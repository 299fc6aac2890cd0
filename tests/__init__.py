"""Test suite package marker to ensure deterministic module names."""
