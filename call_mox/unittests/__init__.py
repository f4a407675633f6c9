"""Unit tests for call_mox."""
