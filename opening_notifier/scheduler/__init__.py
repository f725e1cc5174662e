"""Scheduler module for the daily opening announcement.

Schedule overview:
  - 16:57 UTC daily - Wait for the venue to open, then announce it
"""
