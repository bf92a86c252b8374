"""Style rules for playstyle.

Importing the rule modules registers them; the import order below is the
order in which the engine runs them.
"""

# ruff: noqa: I001
# Import rules to trigger registration
import playstyle.rules.document_start as _document_start  # noqa: F401
import playstyle.rules.quoting as _quoting  # noqa: F401
import playstyle.rules.booleans as _booleans  # noqa: F401
import playstyle.rules.spacing as _spacing  # noqa: F401
import playstyle.rules.mapping_syntax as _mapping_syntax  # noqa: F401
import playstyle.rules.privilege as _privilege  # noqa: F401
from playstyle.rules.base import Rule
from playstyle.rules.registry import RuleRegistry, UnknownRuleError

__all__ = [
    "Rule",
    "RuleRegistry",
    "UnknownRuleError",
]
