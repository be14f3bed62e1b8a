"""Filesystem storage for World uploads."""
