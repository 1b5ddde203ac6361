"""
Per-restaurant menus and batch item validation.
"""
