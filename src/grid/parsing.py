"""Text grid parsing utilities."""

import re
from typing import List, Tuple

from .models import EMPTY, Grid, ValidationError
from .grid import build_grid


# Characters accepted as an empty cell in text grids
EMPTY_MARKERS = {".", "_", "#"}


def extract_grid_content(spec: str) -> str:
    """Extract content from between <grid> and </grid> tags."""
    match = re.search(r'<grid>(.*?)</grid>', spec, re.DOTALL)
    if match:
        return match.group(1).strip()
    return spec.strip()


def parse_grid(spec: str) -> Tuple[List[str], List[ValidationError]]:
    """
    Parse a text grid into rows of cells with error collection.

    Each non-blank line is a row. Letters are kept as-is and empty markers
    become the EMPTY sentinel. Returns a tuple of (rows, errors).
    """
    spec = extract_grid_content(spec)
    lines = [line.strip() for line in spec.split('\n') if line.strip()]

    errors: List[ValidationError] = []
    rows: List[str] = []

    if not lines:
        errors.append(ValidationError(
            code="EMPTY_GRID",
            message="Grid specification is empty"
        ))
        return rows, errors

    width = len(lines[0])
    for i, line in enumerate(lines, start=1):
        if len(line) != width:
            errors.append(ValidationError(
                code="JAGGED_ROW",
                message=f"Row '{line}' has {len(line)} cells, expected {width}",
                line=i
            ))
            continue

        row = ""
        for char in line:
            if char in EMPTY_MARKERS:
                row += EMPTY
            elif char.isalpha() and len(char.lower()) == 1:
                row += char
            else:
                errors.append(ValidationError(
                    code="INVALID_CELL",
                    message=f"Invalid cell '{char}' in row '{line}'",
                    line=i
                ))
                break
        else:
            rows.append(row)

    return rows, errors


def parse_grid_or_raise(spec: str) -> Grid:
    """
    Parse a text grid and build it.

    Raises ValueError if parsing fails.
    """
    rows, errors = parse_grid(spec)

    if errors:
        raise ValueError(f"Grid errors: {[e.message for e in errors]}")

    return build_grid(rows)
