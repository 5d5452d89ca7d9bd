"""
Tabular Export - CLI Module
"""
