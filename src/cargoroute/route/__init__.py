"""Route layer.

Owns the ordered delivery stops and keeps item destinations pointing at
stops that still exist.
"""
