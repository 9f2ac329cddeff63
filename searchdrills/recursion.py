"""Classic recursive drills: towers of Hanoi, fast powers, paper cutting."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Sequence

Move = tuple[int, int]

BAR = "____"
INTRO = "어느 한 컴퓨터공학과 학생이 유명한 교수님을 찾아가 물었다."
QUESTION = '"재귀함수가 뭔가요?"'
STORY = (
    '"잘 들어보게. 옛날옛날 한 산 꼭대기에 이세상 모든 지식을 통달한 선인이 있었어.',
    "마을 사람들은 모두 그 선인에게 수많은 질문을 했고, 모두 지혜롭게 대답해 주었지.",
    '그의 답은 대부분 옳았다고 하네. 그런데 어느 날, 그 선인에게 한 선비가 찾아와서 물었어."',
)
ANSWER = '"재귀함수는 자기 자신을 호출하는 함수라네"'
CLOSING = "라고 답변하였지."


def _hanoi(n: int, source: int, target: int) -> Iterator[Move]:
    if n == 1:
        yield source, target
        return
    spare = 6 - source - target
    yield from _hanoi(n - 1, source, spare)
    yield source, target
    yield from _hanoi(n - 1, spare, target)


def hanoi_moves(n: int) -> list[Move]:
    """Moves (from peg, to peg) carrying n discs from peg 1 to peg 3."""
    if n < 1:
        raise ValueError(f"need at least one disc, got {n}")
    return list(_hanoi(n, 1, 3))


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """base ** exponent % modulus, computed by repeated squaring."""
    if modulus < 1:
        raise ValueError(f"modulus must be positive, got {modulus}")
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    return pow(base, exponent, modulus)


def recursion_chatbot(depth: int) -> str:
    """The nested question-and-answer story told to the given depth."""
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")
    lines = [INTRO]
    for level in range(depth + 1):
        indent = BAR * level
        lines.append(indent + QUESTION)
        if level == depth:
            lines.append(indent + ANSWER)
        else:
            lines.extend(indent + line for line in STORY)
    lines.extend(BAR * level + CLOSING for level in range(depth, -1, -1))
    return "\n".join(lines) + "\n"


def _square_size(board: Sequence[Sequence[int]], split: int) -> int:
    n = len(board)
    if n == 0 or any(len(row) != n for row in board):
        raise ValueError("the paper must be a non-empty square")
    size = n
    while size > 1:
        if size % split:
            raise ValueError(f"side {n} is not a power of {split}")
        size //= split
    return n


def _count_pieces(board: Sequence[Sequence[int]], split: int) -> Counter:
    """Cut the paper into split x split parts until each part is uniform."""
    n = _square_size(board, split)
    counts: Counter = Counter()

    def cut(top: int, left: int, size: int) -> None:
        first = board[top][left]
        if all(
            board[r][c] == first
            for r in range(top, top + size)
            for c in range(left, left + size)
        ):
            counts[first] += 1
            return
        step = size // split
        for i in range(split):
            for j in range(split):
                cut(top + i * step, left + j * step, step)

    cut(0, 0, n)
    return counts


def count_paper_ternary(board: Sequence[Sequence[int]]) -> tuple[int, int, int]:
    """Numbers of uniform pieces filled with -1, 0 and 1, cutting in nine."""
    if any(value not in (-1, 0, 1) for row in board for value in row):
        raise ValueError("paper cells must be -1, 0 or 1")
    counts = _count_pieces(board, 3)
    return counts[-1], counts[0], counts[1]


def count_paper_binary(board: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Numbers of white (0) and blue (1) uniform pieces, cutting in four."""
    if any(value not in (0, 1) for row in board for value in row):
        raise ValueError("paper cells must be 0 or 1")
    counts = _count_pieces(board, 2)
    return counts[0], counts[1]