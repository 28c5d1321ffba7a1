"""
Error handling for parliament with detailed error messages
Structured error records are plain dictionaries; exceptions wrap them
"""

from typing import Any, List, Optional, Dict


# ============================================================================
# DATA STRUCTURES (Immutable Dictionaries)
# ============================================================================

def make_collection_error(
    message: str,
    operation: str,
    got: Optional[str] = None,
    expected: Optional[List[str]] = None,
    suggestions: Optional[List[str]] = None
) -> Dict:
    """Create an immutable collection error structure"""
    return {
        'message': message,
        'operation': operation,
        'got': got,
        'expected': expected or [],
        'suggestions': suggestions or []
    }


def format_collection_error(error: Dict) -> str:
    """Format collection error as string"""
    error_msg = f"{error['operation']}: {error['message']}\n"

    if error['expected']:
        error_msg += f"  Expected: {', '.join(error['expected'])}\n"

    if error['got']:
        error_msg += f"  Got: {error['got']}\n"

    if error['suggestions']:
        error_msg += f"  Suggestions:\n"
        for suggestion in error['suggestions']:
            error_msg += f"    - {suggestion}\n"

    return error_msg


# ============================================================================
# PURE FUNCTIONS
# ============================================================================

def describe_type(value: Any) -> str:
    """Short type description used in error messages"""
    if value is None:
        return "None"
    return type(value).__name__


def generate_suggestions(value: Any) -> List[str]:
    """Generate helpful suggestions based on the offending value"""
    suggestions = []

    if value is None:
        suggestions.append("Pass an empty list instead of None")

    if isinstance(value, dict):
        suggestions.append("Use list(d.items()) or Dict(d) for key/value data")

    if isinstance(value, (str, bytes)):
        suggestions.append("Wrap text in a list to treat it as a single element")

    if isinstance(value, (set, frozenset)):
        suggestions.append("Sets are unordered - sort them into a list first")

    if callable(value):
        suggestions.append("Did you pass arguments in the wrong order? Collections come last")

    return suggestions


# ============================================================================
# EXCEPTION CLASSES
# ============================================================================

class ParliamentError(Exception):
    """Base class for all parliament errors"""


class VectorConstructionError(ParliamentError, TypeError):
    """Raised when a Vector is built from something that is not a sequence"""
    def __init__(self, value: Any):
        self.value = value
        self.error = make_collection_error(
            message="Passed argument is not an ordered sequence.",
            operation="Vector",
            got=describe_type(value),
            expected=["list", "tuple", "range"],
            suggestions=generate_suggestions(value)
        )
        super().__init__(self.error['message'])

    def __str__(self) -> str:
        return format_collection_error(self.error)


class UnsupportedCollectionError(ParliamentError, TypeError):
    """Raised when a generic operation receives an unrecognised collection"""
    def __init__(self, operation: str, value: Any, expected: Optional[List[str]] = None):
        self.operation = operation
        self.value = value
        self.error = make_collection_error(
            message="Unsupported collection type.",
            operation=operation,
            got=describe_type(value),
            expected=expected,
            suggestions=generate_suggestions(value)
        )
        self.expected = self.error['expected']
        self.suggestions = self.error['suggestions']
        super().__init__(self.error['message'])

    def __str__(self) -> str:
        return format_collection_error(self.error)
