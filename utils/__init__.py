"""
Pure algorithms with no domain-specific dependencies.

Modules:
    graph          - Visited-guarded depth-first walks and reachability helpers
    logging_setup  - Logging configuration for scripts
"""
