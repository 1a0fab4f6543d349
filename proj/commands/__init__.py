"""
Command modules for the proj CLI.
"""
