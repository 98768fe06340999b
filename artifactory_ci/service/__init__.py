"""Outer layer: command line presentation over the resolver."""
