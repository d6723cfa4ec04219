"""Shared constants for codecache."""
