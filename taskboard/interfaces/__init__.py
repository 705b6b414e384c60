"""User-facing interfaces for Taskboard."""
