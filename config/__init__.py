"""
Configuration package: environment-backed settings and shared constants.
"""
