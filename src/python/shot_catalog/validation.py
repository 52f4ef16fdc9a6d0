"""
Boundary validation for untyped documents.

Import files, remote responses and similar external documents must be a
plain mapping of string keys to lists of strings. Anything else (a list,
null, a scalar, or a mapping with other value types) is rejected as a whole.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from shot_catalog.exceptions import ImportFormatError

logger = logging.getLogger(__name__)


def validate_mapping(document: Any, what: str = "document") -> Dict[str, List[str]]:
    """
    Check that ``document`` is a key -> list of strings mapping.

    Args:
        document: Parsed document to check
        what: Short description used in error messages

    Returns:
        A copy of the mapping with fresh lists

    Raises:
        ImportFormatError: If the shape is anything else
    """
    if not isinstance(document, dict):
        raise ImportFormatError(f"Invalid {what}: expected a mapping, got {type(document).__name__}")

    result: Dict[str, List[str]] = {}
    for key, values in document.items():
        if not isinstance(key, str):
            raise ImportFormatError(f"Invalid {what}: key {key!r} is not a string")
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise ImportFormatError(f"Invalid {what}: entry {key!r} is not a list of strings")
        result[key] = list(values)

    return result


@dataclass
class ImportResult:
    """
    Outcome of parsing an import document.

    Attributes:
        ok: True when the document was valid
        data: The validated mapping (empty on failure)
        error: Why the document was rejected (None on success)
    """
    ok: bool
    data: Dict[str, List[str]] = field(default_factory=dict)
    error: Optional[str] = None


def parse_import_document(text: str) -> ImportResult:
    """
    Parse and validate the text of an import file.

    Never raises; failures are reported through the result.
    """
    try:
        document = json.loads(text)
    except ValueError as e:
        logger.warning("Import document is not valid JSON: %s", e)
        return ImportResult(ok=False, error=f"Not valid JSON: {e}")

    try:
        data = validate_mapping(document, "import file")
    except ImportFormatError as e:
        logger.warning("%s", e)
        return ImportResult(ok=False, error=str(e))

    return ImportResult(ok=True, data=data)
