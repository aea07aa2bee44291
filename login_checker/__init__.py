"""
Login Checker

Configuration resolution for the login checker service.
"""

__version__ = '0.1.0'
