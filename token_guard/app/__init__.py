"""
Application package for Token Guard.
"""
