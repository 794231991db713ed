"""Failure-link construction: turns the trie into an automaton.

Breadth-first from the root. When the automaton is at node u (prefix
s) and reads a character c that u has no edge for, it should fall back
to the state for the longest proper suffix of s + c that is still a
prefix in the trie. That state is the failure target of u's child on c,
and it can be found from the parent's failure chain:

    f = fail(u)
    while f is not root and c not in f.children:
        f = fail(f)
    fail(child) = f.children[c] if c in f.children else root

BFS order guarantees every node on the parent's failure chain is
shallower than the child and has already been resolved.

Outputs are propagated in the same pass: a node's output is its own
pattern followed by its failure target's output. The failure target is
shallower, so its output is already complete when the child is
processed. Patterns in one output list never repeat, because each
pattern ends at exactly one node and the failure chain visits strictly
shorter prefixes.

Getting this wrong does not crash. It silently drops matches, which is
why the tests check the suffix invariant on every node.
"""

from __future__ import annotations

from collections import deque

from patternscan.automaton.node import ACNode


def _reset(root: ACNode) -> None:
    """Clear failure links and outputs left by a previous build."""
    stack = [root]
    while stack:
        node = stack.pop()
        node.fail = None
        node.output = []
        stack.extend(node.children.values())


def build_failure_links(root: ACNode) -> int:
    """Compute failure links and output sets for the trie under root.

    Safe to call repeatedly: every link and output list is recomputed
    from the trie contents alone. The root's output stays empty, so an
    inserted empty pattern is never reported.

    Returns the number of states processed, root included.
    """
    _reset(root)
    root.fail = root
    queue: deque[ACNode] = deque()
    processed = 1

    for child in root.children.values():
        child.fail = root
        child.output = [child.pattern] if child.pattern is not None else []
        queue.append(child)

    while queue:
        current = queue.popleft()
        processed += 1
        for ch, child in current.children.items():
            fallback = current.fail
            while fallback is not root and ch not in fallback.children:
                fallback = fallback.fail  # type: ignore[assignment]
            child.fail = fallback.children.get(ch, root)

            own = [child.pattern] if child.pattern is not None else []
            child.output = own + child.fail.output
            queue.append(child)

    return processed
