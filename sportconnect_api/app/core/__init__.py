"""
Core infrastructure: configuration, logging, error types and the
durable snapshot storage port.
"""
