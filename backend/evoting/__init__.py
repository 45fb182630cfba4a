"""
Online voting backend.
"""
