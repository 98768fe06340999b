"""Inner layer: host snapshot models, errors, logging and resolution.

Nothing in this package imports from ``config``, ``di`` or ``service``.
"""
