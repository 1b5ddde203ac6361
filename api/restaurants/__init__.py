"""
Restaurant listing, lookup and the open/closed admin toggle.
"""
