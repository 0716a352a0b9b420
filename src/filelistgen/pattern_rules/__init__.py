"""Pattern rules for selecting files during a scan."""

from .ant_rules import AntPatternRules
from .base_rules import BasePatternRules
from .selection_rules import SelectionRules

__all__ = [
    "AntPatternRules",
    "BasePatternRules",
    "SelectionRules",
]
