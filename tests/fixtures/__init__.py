"""Recorded hosted-inference responses used by tests."""
