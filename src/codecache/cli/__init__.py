"""Command-line interface for codecache."""
