"""CLI (typer + Rich)."""
