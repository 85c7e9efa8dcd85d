"""Access Control package.

Organized by feature modules (codes, scans, reports, users) with a thin Flask
controller layer on top of service/repository layers.
"""
