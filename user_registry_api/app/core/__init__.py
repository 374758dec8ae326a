"""
Core infrastructure: settings and logging.
"""
