"""CLI module for hostservice."""
