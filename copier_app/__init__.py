"""
Trade Copier Relay

Relays trading signals from a single Master terminal to any number of
Slave terminals. Each Slave polls for the signals it has not yet executed
and acknowledges them one by one, so every Slave runs a signal at most once.
"""

__version__ = "0.1.0"
__author__ = "Trade Copier Team"
