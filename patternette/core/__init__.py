"""Core tree and dispatch classes."""
