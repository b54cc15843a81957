"""
Utility functions module.

Time handling shared by the signal log and the HTTP layer. All timestamps
are wall-clock UTC: the relay does not see market time, only arrival time.
"""
