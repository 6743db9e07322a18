from typing import (
    LiteralString,
    Optional,
    Iterable,
    Iterator,
    Union,
    Callable,
    cast,
)
from mypy_extensions import KwArg, VarArg

# --
# HTMPL builds HTML documents out of nodes, which are then rendered as a
# stream of strings.

HTML_EMPTY: list[LiteralString] = "br hr img input link meta".split()
HTML_ESCAPED = str.maketrans(
    {"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;", "'": "&#x27;"}
)
HTML_QUOTED = str.maketrans({"&": "&amp;", '"': "&quot;"})


def escape(text: str) -> str:
    return text.translate(HTML_ESCAPED)


def quoted(text: Optional[str]) -> str:
    return text.translate(HTML_QUOTED) if text else ""


TNodeContent = Union["Node", str]
TAttributeContent = str | None


class Node:
    __slots__ = ["name", "attributes", "children"]

    def __init__(
        self,
        name: str,
        children: Optional[Iterable[TNodeContent]] = None,
        attributes: Optional[dict[str, TAttributeContent]] = None,
    ):
        self.name = name
        self.attributes: dict[str, TAttributeContent] = attributes or {}
        self.children: list[TNodeContent] = [_ for _ in children] if children else []

    def iterHTML(self) -> Iterator[str]:
        if self.name == "#raw":
            yield self.attributes.get("#value") or ""
        elif self.name == "#text":
            yield escape(self.attributes.get("#value") or "")
        else:
            yield f"<{self.name}"
            for k, v in self.attributes.items():
                yield f' {k}="{quoted(v)}"' if v is not None else f" {k}"
            yield ">"
            if self.name not in HTML_EMPTY:
                for _ in self.children:
                    if isinstance(_, Node):
                        yield from _.iterHTML()
                    else:
                        yield escape(_)
                yield f"</{self.name}>"

    def __str__(self) -> str:
        return "".join(self.iterHTML())


def text(value: str) -> Node:
    """A text node, escaped on output."""
    return Node("#text", attributes={"#value": value})


def raw(value: str) -> Node:
    """A node output as-is, without any escaping."""
    return Node("#raw", attributes={"#value": value})


NodeFactory = Callable[
    [
        VarArg(TNodeContent),
        KwArg(TAttributeContent),
    ],
    Node,
]


def nodeFactory(name: str) -> NodeFactory:
    def f(*children: TNodeContent, **attributes: TAttributeContent) -> Node:
        return Node(
            name,
            children=[text(_) if isinstance(_, str) else _ for _ in children],
            # `class` is a keyword, so `_` stands for it
            attributes={("class" if k == "_" else k): v for k, v in attributes.items()},
        )

    f.__name__ = name
    return cast(NodeFactory, f)


HTML_TAGS: list[LiteralString] = (
    """\
a body div h1 h2 head html li link meta p section span style title ul\
""".split()
)


class Markup:
    __slots__ = ["_factories"]

    def __init__(self, factories: dict[str, NodeFactory]):
        self._factories: dict[str, NodeFactory] = factories

    def __getattribute__(self, name: str) -> NodeFactory:
        if name.startswith("_"):
            return super().__getattribute__(name)
        else:
            factories = self._factories
            if name not in factories:
                raise KeyError(
                    f"No tag {name}, pick one of {','.join(factories.keys())}"
                )
            else:
                return factories[name]


def markup(tags: list[LiteralString]) -> Markup:
    return Markup({_: nodeFactory(_) for _ in tags})


H: Markup = markup(HTML_TAGS)


def html(*nodes: Node) -> Iterator[str]:
    for _ in nodes:
        yield from _.iterHTML()


# EOF
