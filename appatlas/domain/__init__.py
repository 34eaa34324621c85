"""Domain layer for appatlas."""
