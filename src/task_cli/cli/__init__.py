"""
Command-line layer: verb handlers (commands.py), wiring (bootstrap.py), entrypoint (main.py).
"""
