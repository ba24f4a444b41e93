"""
Fragment definitions for helper markup.

A fragment is a small tree of nodes (literal text, interpolations,
conditionals and loops) assembled with :class:`FragmentBuilder` and compiled
to Jinja2 source once, when it is rendered.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

_JINJA_DELIMITERS = ('{{', '{%', '{#')


class FragmentError(ValueError):
    """Raised when a fragment is assembled with unbalanced or misplaced blocks."""


@dataclass
class Text:
    value: str

    def compile(self) -> str:
        if any(delimiter in self.value for delimiter in _JINJA_DELIMITERS):
            return '{% raw %}' + self.value + '{% endraw %}'
        return self.value


@dataclass
class Interpolation:
    expression: str
    raw: bool = False

    def compile(self) -> str:
        if self.raw:
            return '{{ (' + self.expression + ')|safe }}'
        return '{{ ' + self.expression + ' }}'


@dataclass
class Conditional:
    branches: List[Tuple[str, list]]
    otherwise: Optional[list] = None

    def compile(self) -> str:
        parts = []
        for index, (condition, body) in enumerate(self.branches):
            keyword = 'if' if index == 0 else 'elif'
            parts.append('{% ' + keyword + ' ' + condition + ' %}')
            parts.append(compile_nodes(body))
        if self.otherwise is not None:
            parts.append('{% else %}')
            parts.append(compile_nodes(self.otherwise))
        parts.append('{% endif %}')
        return ''.join(parts)


@dataclass
class Loop:
    target: str
    iterable: str
    body: list = field(default_factory=list)

    def compile(self) -> str:
        return ('{% for ' + self.target + ' in ' + self.iterable + ' %}'
                + compile_nodes(self.body)
                + '{% endfor %}')


Node = Union[Text, Interpolation, Conditional, Loop]


def compile_nodes(nodes) -> str:
    """Compile a sequence of nodes to Jinja2 source."""
    return ''.join(node.compile() for node in nodes)


class Fragment:
    """An immutable, fully balanced fragment definition."""

    def __init__(self, nodes: Tuple[Node, ...]):
        self.nodes = nodes
        self._source = None

    @property
    def source(self) -> str:
        if self._source is None:
            self._source = compile_nodes(self.nodes)
        return self._source

    def __repr__(self):
        return f"Fragment({len(self.nodes)} nodes)"


class FragmentBuilder:
    """
    Assemble a fragment node by node.

    Blocks opened with :meth:`if_` or :meth:`for_` are closed with
    :meth:`end`. All methods except :meth:`build` return the builder.
    """

    def __init__(self):
        self._root: List[Node] = []
        self._open: List[Tuple[Node, list]] = []

    def _body(self) -> list:
        return self._open[-1][1] if self._open else self._root

    def _current_conditional(self, method: str) -> Conditional:
        if not self._open or not isinstance(self._open[-1][0], Conditional):
            raise FragmentError(f"{method}() called outside of an if_() block")
        node = self._open[-1][0]
        if node.otherwise is not None:
            raise FragmentError(f"{method}() called after else_()")
        return node

    def text(self, value: str) -> 'FragmentBuilder':
        self._body().append(Text(value))
        return self

    def expr(self, expression: str, raw: bool = False) -> 'FragmentBuilder':
        self._body().append(Interpolation(expression, raw))
        return self

    def raw(self, expression: str) -> 'FragmentBuilder':
        """Interpolate without HTML escaping."""
        return self.expr(expression, raw=True)

    def if_(self, condition: str) -> 'FragmentBuilder':
        body: list = []
        node = Conditional([(condition, body)])
        self._body().append(node)
        self._open.append((node, body))
        return self

    def elif_(self, condition: str) -> 'FragmentBuilder':
        node = self._current_conditional('elif_')
        body: list = []
        node.branches.append((condition, body))
        self._open[-1] = (node, body)
        return self

    def else_(self) -> 'FragmentBuilder':
        node = self._current_conditional('else_')
        node.otherwise = []
        self._open[-1] = (node, node.otherwise)
        return self

    def for_(self, target: str, iterable: str) -> 'FragmentBuilder':
        if not target.isidentifier():
            raise FragmentError(f"Invalid loop target: {target!r}")
        node = Loop(target, iterable)
        self._body().append(node)
        self._open.append((node, node.body))
        return self

    def end(self) -> 'FragmentBuilder':
        if not self._open:
            raise FragmentError("end() called with no open block")
        self._open.pop()
        return self

    def build(self) -> Fragment:
        if self._open:
            kinds = ', '.join(type(node).__name__ for node, _ in self._open)
            raise FragmentError(f"Fragment has unclosed blocks: {kinds}")
        return Fragment(tuple(self._root))
