"""
Text rendering for vectors and matrices.

The formats are for demonstration and debugging only:

    vector:  [ 1.000000, -3.000000, 2.500000 ]
    matrix:  | 1.000000 0.000000 |
             | 0.000000 1.000000 |

format_* functions return the text; dump_* functions write it to a stream
(sys.stdout by default).
"""

from __future__ import annotations

import sys
from typing import TextIO, TYPE_CHECKING

if TYPE_CHECKING:
    from pyvecmat.vector.vector import Vector
    from pyvecmat.matrix.matrix import Matrix

DEFAULT_DECIMALS = 6


def _fixed(value: float, decimals: int) -> str:
    return f"{float(value):.{decimals}f}"


def format_vector(v: Vector, decimals: int = DEFAULT_DECIMALS) -> str:
    """Render as ``[ e0, e1, ..., en ]`` without a trailing newline."""
    body = ", ".join(_fixed(x, decimals) for x in v.elements)
    return f"[ {body} ]"


def format_matrix(m: Matrix, decimals: int = DEFAULT_DECIMALS) -> str:
    """Render one ``| e0 e1 ... em |`` line per row, with a trailing newline."""
    lines = []
    for row in m.elements:
        cells = "".join(f" {_fixed(x, decimals)}" for x in row)
        lines.append(f"|{cells} |")
    return "\n".join(lines) + "\n"


def dump_vector(v: Vector, file: TextIO | None = None, decimals: int = DEFAULT_DECIMALS) -> None:
    """Write format_vector(v) and a newline to file (default sys.stdout)."""
    out = sys.stdout if file is None else file
    out.write(format_vector(v, decimals) + "\n")


def dump_matrix(m: Matrix, file: TextIO | None = None, decimals: int = DEFAULT_DECIMALS) -> None:
    """Write format_matrix(m) to file (default sys.stdout)."""
    out = sys.stdout if file is None else file
    out.write(format_matrix(m, decimals))
