"""
Path rule for the read guard.
Deterministic, no I/O: decides from the candidate path's text alone.

Two outcomes:
  - ALLOW  → anything that is not a .yaml file, plus docs/openapi.yaml
  - BLOCK  → every other .yaml file
"""

from dataclasses import dataclass

BLOCKED_SUFFIX = ".yaml"
ALLOWED_SUFFIX = "docs/openapi.yaml"
BLOCK_MESSAGE = "You cannot read .yaml files except for docs/openapi.yaml"


@dataclass
class Decision:
    allowed: bool
    reason: str = ""
    path: str = ""


def extract_candidate_path(hook_data) -> str:
    """Pull the path Claude is trying to read out of the hook payload."""
    if not isinstance(hook_data, dict):
        return ""
    tool_input = hook_data.get("tool_input")
    if not isinstance(tool_input, dict):
        return ""

    for key in ("file_path", "path"):
        value = tool_input.get(key)
        if isinstance(value, str) and value:
            return value
    return ""


def normalize_path(path: str) -> str:
    # Windows separators → POSIX
    return path.replace("\\", "/")


def evaluate_path(path: str) -> Decision:
    """
    Apply the .yaml rule to a candidate path.

    The extension check is case-sensitive. The exception is a suffix
    match, so config/other/docs/openapi.yaml is allowed as well.
    """
    if not path.endswith(BLOCKED_SUFFIX):
        return Decision(allowed=True, path=path)

    if normalize_path(path).endswith(ALLOWED_SUFFIX):
        return Decision(allowed=True, path=path)

    return Decision(allowed=False, reason=BLOCK_MESSAGE, path=path)
