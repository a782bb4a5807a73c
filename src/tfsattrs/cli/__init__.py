"""Command-line interface for tfsattrs."""
