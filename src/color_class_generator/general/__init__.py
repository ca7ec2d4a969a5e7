"""
general.
=======

Shared general-purpose modules used across the palette package
(config loading, topic debug logging).
"""

__docformat__ = "google"
