"""User activity feed service package.

Collects recent edits, comments, relationship changes, board messages and
system notices for a user and condenses them into summary lines.
"""
