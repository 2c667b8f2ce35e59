"""doclinks API layer.

Each command lives in ``doclinks/api/<domain>/cmd_<name>.py`` and returns a
``StageResult``.
"""
