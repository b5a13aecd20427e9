"""
Core WKT conversion functionality.
"""
