"""
CLI Client Module.

Terminal presentation layer for notes, built with Typer and Rich.

Architecture:
- CLI only renders and prompts
- Note state comes from the client hook, which calls the backend over HTTP
- Sends X-Frontend-ID: cli header for log routing

Usage:
    python cli.py notes list
    python cli.py notes add --title Groceries --content "milk, eggs" --color green
"""
