"""Scoreboard domain services.

Pure grid arithmetic used by clients; the relay itself never inspects
grid payloads.
"""
