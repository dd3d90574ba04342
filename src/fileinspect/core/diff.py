"""Line-based diff engine with an annotated report and a character-count summary.

Texts are split on "\\n" and "\\r\\n", so a trailing terminator yields a final
empty line. Alignment is a longest-common-subsequence match over whole lines,
which gives a minimal edit script. Among equally short scripts the table is
walked from the end, matching the latest possible lines; within a hunk every
Removed op precedes every Added op.

Time and memory are O(N*M) in the number of lines left after trimming the
common prefix and suffix.
"""

from fileinspect.core.models import Added, DiffOp, DiffSequence, Removed, Summary, Unchanged


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    # "\r\n" is one terminator; a lone "\r" on the last line is content.
    return [line[:-1] if line.endswith("\r") else line for line in lines[:-1]] + lines[-1:]


def _lcs_table(left: list[str], right: list[str]) -> list[list[int]]:
    """table[i][j] is the LCS length of left[:i] and right[:j]."""
    n, m = len(left), len(right)
    table = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n):
        row, above = table[i + 1], table[i]
        for j in range(m):
            if left[i] == right[j]:
                row[j + 1] = above[j] + 1
            else:
                row[j + 1] = max(above[j + 1], row[j])
    return table


def _align(left: list[str], right: list[str]) -> list[DiffOp]:
    """Walk the LCS table backward, preferring additions on ties."""
    table = _lcs_table(left, right)
    ops: list[DiffOp] = []
    i, j = len(left), len(right)
    while i > 0 or j > 0:
        if i > 0 and j > 0 and left[i - 1] == right[j - 1]:
            ops.append(Unchanged(left[i - 1]))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or table[i][j - 1] >= table[i - 1][j]):
            ops.append(Added(right[j - 1]))
            j -= 1
        else:
            ops.append(Removed(left[i - 1]))
            i -= 1
    ops.reverse()
    return ops


def compute_diff(left: str, right: str) -> DiffSequence:
    """Align the lines of left and right into Removed/Unchanged/Added ops."""
    a, b = _split_lines(left), _split_lines(right)
    shortest = min(len(a), len(b))

    prefix = 0
    while prefix < shortest and a[prefix] == b[prefix]:
        prefix += 1
    suffix = 0
    while suffix < shortest - prefix and a[-1 - suffix] == b[-1 - suffix]:
        suffix += 1

    ops: list[DiffOp] = [Unchanged(line) for line in a[:prefix]]
    ops.extend(_align(a[prefix:len(a) - suffix], b[prefix:len(b) - suffix]))
    ops.extend(Unchanged(line) for line in a[len(a) - suffix:])
    return tuple(ops)


def advance_line_counter(counter: int, op: DiffOp) -> int:
    """Return the line number for op given the previous one.

    Every op increments the counter; an Added op then decrements it again, so
    it shares the number of the op before it. A removed line and the line
    that replaces it therefore count as one.
    """
    counter += 1
    if isinstance(op, Added):
        counter -= 1
    elif not isinstance(op, (Removed, Unchanged)):
        raise TypeError(f"Unknown diff op: {op!r}")
    return counter


def _sigil(op: DiffOp) -> str:
    if isinstance(op, Removed):
        return "-"
    if isinstance(op, Unchanged):
        return " "
    if isinstance(op, Added):
        return "+"
    raise TypeError(f"Unknown diff op: {op!r}")


def format_diff(ops: DiffSequence) -> str:
    """Render ops as numbered lines: '{number} {sigil}{text}\\n'."""
    counter = 0
    out = []
    for op in ops:
        counter = advance_line_counter(counter, op)
        out.append(f"{counter} {_sigil(op)}{op.line}\n")
    return "".join(out)


def summarize(ops: DiffSequence) -> Summary:
    """Return character counts per op kind plus the collapsed line counter.

    Characters are counted as code points. 'lines' is the counter from
    advance_line_counter after the last op, so a Removed/Added pair counts once.
    """
    summary: Summary = {"removed": 0, "not changed": 0, "added": 0, "lines": 0}
    for op in ops:
        summary["lines"] = advance_line_counter(summary["lines"], op)
        if isinstance(op, Removed):
            summary["removed"] += len(op.line)
        elif isinstance(op, Unchanged):
            summary["not changed"] += len(op.line)
        elif isinstance(op, Added):
            summary["added"] += len(op.line)
    return summary


def diff_report(left: str, right: str) -> str:
    """Annotated report for two texts in one call."""
    return format_diff(compute_diff(left, right))


def diff_summary(left: str, right: str) -> Summary:
    """Summary counts for two texts in one call."""
    return summarize(compute_diff(left, right))
