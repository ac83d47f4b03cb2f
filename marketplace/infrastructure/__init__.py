"""
Infrastructure package.
"""
