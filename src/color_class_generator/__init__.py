"""
color_class_generator
=====================

Does: Root package initializer for the color utility-class generator.
Returns: Exposes the `palette` (expansion, emission, rendering) and `general`
         (config/logging helpers) subpackages through a stable namespace.
Used by: All higher-level imports starting from `color_class_generator.*`.
"""

__all__: list[str] = []
__docformat__ = "google"
