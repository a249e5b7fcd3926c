"""
StateLab Shared Kernel
======================

Code used by both demo applications.

Architecture:
- core: change notification, configuration, logging, exit cleanup
- domain: the shared counter model
- ui: theme tokens
"""
