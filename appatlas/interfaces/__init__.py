"""User-facing interfaces for appatlas."""
