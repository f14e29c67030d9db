"""Argument reconstruction and brace expansion.

Only one flat `{a,b c}` group per token is expanded. Nested groups, ranges and
multiple groups per token are out of scope; anything beyond the first group is
kept as literal text.
"""
