"""
Observability for Climate Monitor: logging, metrics and the HTTP runner.
"""
