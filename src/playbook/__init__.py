"""Playbook Chess: a reduced-rule chess board with click-to-move play."""

__version__ = "0.1.0"
