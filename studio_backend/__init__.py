"""
Backend package for the script studio relay.

This package provides a FastAPI application that proxies prompts to the
configured text-generation providers and keeps per-user programmes and
scripts in process memory.
"""
