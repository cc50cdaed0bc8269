"""
Notes Application.

- backend/: Note store backends, notes API, auth gate, configuration
- client/: Async client of the notes API (actions and hook)
- cli/: Terminal notes client (Typer + Rich)
"""
