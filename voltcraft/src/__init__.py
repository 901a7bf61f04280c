"""
Voltcraft energy-logger package.

Decodes the binary log files written by Voltcraft power-monitoring meters
into timestamped readings and derives daily, overall and blackout
statistics from them.

CHANGELOG:
- 2026-10-18: Initial creation

TODO:
- None
"""
