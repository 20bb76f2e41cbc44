"""
Version Checker - Version Information
"""

VERSION = "1.0.0"
