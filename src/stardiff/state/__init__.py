"""State layer.

This package owns the baseline snapshot and is the only place allowed to
compare incoming snapshots against it and move it forward.
"""
