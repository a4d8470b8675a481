"""
Return series adapter module.

Input models and the pure helpers that turn close prices into the
log-return series consumed by the analysis engines.
"""
