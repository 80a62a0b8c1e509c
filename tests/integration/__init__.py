"""Integration tests for pynatureremo library against the live Nature Remo API."""
