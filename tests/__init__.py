"""Test suite for Star Shell."""
