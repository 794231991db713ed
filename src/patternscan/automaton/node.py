"""Automaton state type shared by the trie, compiler, and matcher."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class ACNode:
    """One automaton state: a prefix of at least one inserted pattern.

    children holds the forward trie edges, keyed by a single code point.
    fail is a plain back-reference set during compilation; traversals
    that count or enumerate nodes must walk children only.
    pattern is the pattern spelled by the path to this node, if one was
    inserted. output is the inherited output set, rebuilt on each build.
    """
    children: dict[str, ACNode] = field(default_factory=dict)
    fail: ACNode | None = None
    pattern: str | None = None
    output: list[str] = field(default_factory=list)
    depth: int = 0

    def __repr__(self) -> str:
        return (
            f"ACNode(depth={self.depth}, pattern={self.pattern!r}, "
            f"children={sorted(self.children)!r})"
        )
