"""ROME timeclock package.

Organized by feature modules (workers, punches, time-off, ...) with a thin
Flask controller layer over service/repository layers. Every repository has a
MySQL implementation and an in-memory one used in demo mode.
"""
