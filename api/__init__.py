"""
HTTP API for Slip Scanner.
"""
