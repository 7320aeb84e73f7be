"""Minimal threaded HTTP server serving a single document."""