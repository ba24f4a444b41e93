"""Tests for the fragment builder and renderer."""

import pytest
from jinja2 import TemplateSyntaxError, UndefinedError

from pop_pkg.fragments import FragmentBuilder, FragmentError
from pop_pkg.render import FragmentRenderer


@pytest.fixture
def renderer():
    return FragmentRenderer()


class TestFragmentBuilder:
    """Test cases for FragmentBuilder."""

    def test_text_and_expressions(self, renderer):
        fragment = FragmentBuilder().text('<b>').expr('name').text('</b>').build()
        assert renderer.render(fragment, {'name': 'x & y'}) == '<b>x &amp; y</b>'

    def test_raw_expression(self, renderer):
        fragment = FragmentBuilder().raw('body').build()
        assert renderer.render(fragment, {'body': '<p>ok</p>'}) == '<p>ok</p>'

    def test_conditional_branches(self, renderer):
        fragment = (FragmentBuilder()
                    .if_('n == 1').text('one')
                    .elif_('n == 2').text('two')
                    .else_().text('many')
                    .end()
                    .build())
        assert [renderer.render(fragment, {'n': n}) for n in (1, 2, 3)] == ['one', 'two', 'many']

    def test_loop(self, renderer):
        fragment = FragmentBuilder().for_('item', 'items').expr('item').text(';').end().build()
        assert renderer.render(fragment, {'items': ['a', 'b']}) == 'a;b;'

    def test_literal_delimiters(self, renderer):
        """Text that looks like template syntax is printed as is."""
        fragment = FragmentBuilder().text('{{ not_a_local }}').build()
        assert renderer.render(fragment) == '{{ not_a_local }}'

    def test_unclosed_block(self):
        with pytest.raises(FragmentError, match='unclosed'):
            FragmentBuilder().if_('x').text('y').build()

    def test_end_without_block(self):
        with pytest.raises(FragmentError):
            FragmentBuilder().end()

    def test_else_outside_conditional(self):
        with pytest.raises(FragmentError):
            FragmentBuilder().for_('i', 'items').else_()

    def test_elif_after_else(self):
        with pytest.raises(FragmentError):
            FragmentBuilder().if_('a').else_().elif_('b')

    def test_invalid_loop_target(self):
        with pytest.raises(FragmentError, match='loop target'):
            FragmentBuilder().for_('1st', 'items')


class TestFragmentRenderer:
    """Test cases for FragmentRenderer."""

    def test_undefined_local_fails(self, renderer):
        fragment = FragmentBuilder().expr('missing').build()
        with pytest.raises(UndefinedError):
            renderer.render(fragment, {})

    def test_syntax_error_propagates(self, renderer):
        fragment = FragmentBuilder().expr('1 +').build()
        with pytest.raises(TemplateSyntaxError):
            renderer.render(fragment, {})

    def test_templates_reused(self, renderer):
        first = FragmentBuilder().expr('x').build()
        second = FragmentBuilder().expr('x').build()
        assert renderer.compile(first) is renderer.compile(second)
