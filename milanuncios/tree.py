"""
Milanuncios Scraper - Markup Tree Queries
Depth-first search helpers over a parsed document.

Any node type that exposes ``attrs`` (a mapping) and ``children`` works here;
text nodes are plain strings. BeautifulSoup's ``Tag``/``NavigableString``
fit that shape, so the parser module never calls BeautifulSoup's own
search API.
"""

from typing import Any, Callable, List, Optional

# An element (has ``attrs`` and ``children``) or a text node (a str)
Node = Any
Matcher = Callable[[Node], bool]


def is_element(node: Node) -> bool:
    """True for element nodes (anything with an attribute mapping)."""
    return node is not None and not isinstance(node, str) and getattr(node, "attrs", None) is not None


def _children(node: Node) -> List[Node]:
    return list(getattr(node, "children", None) or ())


def class_tokens(node: Node) -> List[str]:
    """Return the space-separated class tokens of an element."""
    if not is_element(node):
        return []
    value = node.attrs.get("class")
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    return [token for part in value for token in part.split()]


def by_class(name: str) -> Matcher:
    """Build a matcher selecting elements carrying the class token ``name``."""

    def matcher(node: Node) -> bool:
        return name in class_tokens(node)

    return matcher


def find(node: Node, matcher: Matcher) -> Optional[Node]:
    """
    Return the first node matching ``matcher`` in depth-first document order.

    The starting node itself is tested first. Returns None when nothing matches.
    Uses an explicit stack, so document depth is not limited by recursion.
    """
    if node is None:
        return None
    stack = [node]
    while stack:
        current = stack.pop()
        if matcher(current):
            return current
        stack.extend(reversed(_children(current)))
    return None


def find_all(node: Node, matcher: Matcher) -> List[Node]:
    """
    Return every node matching ``matcher`` in document order.

    Matched nodes are not searched further, so a fragment nested inside
    another matching fragment is not reported twice.
    """
    if node is None:
        return []
    matched = []
    stack = [node]
    while stack:
        current = stack.pop()
        if matcher(current):
            matched.append(current)
            continue
        stack.extend(reversed(_children(current)))
    return matched


def leading_text(node: Node) -> str:
    """
    Return the trimmed text of the node's first child.

    Only the text before any nested element is read, e.g. ``2.500`` for
    ``<div>2.500<span>€</span></div>``. Missing nodes and nodes whose first
    child is an element give an empty string.
    """
    children = _children(node)
    if not children or not isinstance(children[0], str):
        return ""
    return str(children[0]).strip()


def text_content(node: Node) -> str:
    """Return all descendant text of a node concatenated, untrimmed."""
    if node is None:
        return ""
    parts = []
    stack = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, str):
            parts.append(str(current))
        else:
            stack.extend(reversed(_children(current)))
    return "".join(parts)


def first_attribute_value(node: Node) -> Optional[str]:
    """
    Return the value of the element's first attribute in source order.

    Multi-valued attributes (``class``) are joined with spaces. Returns None
    when the node is missing or has no attributes.
    """
    if not is_element(node) or not node.attrs:
        return None
    value = next(iter(node.attrs.values()))
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)
