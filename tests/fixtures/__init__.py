"""Test doubles shared by the xeimport test suite."""
