"""
Application layer: configuration consumed by the composition root in `blueprint_fsm.api`.
"""
