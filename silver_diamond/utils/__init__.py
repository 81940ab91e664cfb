"""
Utility functions for the Silver Diamond client
"""

from .validators import Labels, label_value, normalize_labels, normalize_text, optional_label

__all__ = [
    'Labels',
    'label_value',
    'normalize_labels',
    'normalize_text',
    'optional_label',
]
