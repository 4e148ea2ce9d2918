"""
Domain layer: transition table, blueprint builder and machine runtime.

Nothing in here imports third-party packages or the outer layers.
"""
