"""
Depth-aware splitting of WKT collection bodies.

A collection body such as ``POINT(1 2),POLYGON((0 0,1 0,1 1,0 0))`` cannot
be split on every comma because members carry their own commas inside
parentheses. The splitter scans once, left to right, and only treats a
comma as a separator when it sits outside every parenthesis.
"""

from typing import Iterator, List

from geowkt.core.errors import MalformedCollectionError


class BalancedComponentSplitter:
    """
    Iterable over the top-level components of a collection body.

    The scan is lazy and linear in the body length. Each call to ``iter``
    starts a fresh scan, so one splitter may be iterated several times.

    Usage:
        for fragment in BalancedComponentSplitter("POINT(1 2),POINT(3 4)"):
            ...
    """

    def __init__(self, body: str):
        """
        Initialize the splitter.

        Args:
            body: Collection text without keyword and outer parentheses
        """
        self.body = body

    def __iter__(self) -> Iterator[str]:
        body = self.body
        if not body.strip():
            return

        depth = 0
        start = 0
        for index, char in enumerate(body):
            if char == "(":
                depth += 1
            elif char == ")":
                depth -= 1
                if depth < 0:
                    raise MalformedCollectionError(
                        f"Unexpected ')' at offset {index}", text=body
                    )
            elif char == "," and depth == 0:
                yield self._component(start, index)
                start = index + 1

        if depth != 0:
            raise MalformedCollectionError(
                f"Unbalanced parentheses: {depth} left open", text=body
            )
        yield self._component(start, len(body))

    def _component(self, start: int, end: int) -> str:
        fragment = self.body[start:end].strip()
        if not fragment:
            raise MalformedCollectionError(
                f"Empty component at offset {start}", text=self.body
            )
        return fragment

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.body!r})"


def split_components(body: str) -> List[str]:
    """
    Split a collection body into its top-level components.

    Raises:
        MalformedCollectionError: On unbalanced parentheses or empty members
    """
    return list(BalancedComponentSplitter(body))
