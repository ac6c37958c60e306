"""
Application layer: use cases orchestrating the domain against storage
contracts.
"""
