"""Unit tests for dot_render.code and dot_render.state."""

from dot_render.code import (
    DotCode,
    angled,
    brackets,
    comma,
    dquotes,
    empty,
    enclose_sep,
    group,
    hcat,
    hsep,
    line,
    list_doc,
    nest,
    punctuate,
    render_dot,
    set_color_scheme,
    text,
    vcat,
    with_context,
    wrap,
)
from dot_render.colors import X11, BrewerName, BrewerScheme
from dot_render.doc import EMPTY
from dot_render.models import RenderConfig
from dot_render.state import RenderContext

BLUES9 = BrewerScheme(BrewerName.BLUES, 9)


def _scheme_name() -> DotCode:
    def read(ctx: RenderContext) -> DotCode:
        scheme = ctx.active_color_scheme
        return text(scheme.scheme_name if scheme is not None else "none")

    return with_context(read)


class TestCombinators:
    def test_text_and_concat(self) -> None:
        assert render_dot(text("a") + text("b")) == "ab"

    def test_empty(self) -> None:
        assert render_dot(empty()) == ""

    def test_hcat_and_hsep(self) -> None:
        codes = [text("a"), text("b"), text("c")]
        assert render_dot(hcat(codes)) == "abc"
        assert render_dot(hsep(codes)) == "a b c"

    def test_punctuate(self) -> None:
        codes = punctuate(comma(), [text("a"), text("b"), text("c")])
        assert render_dot(hcat(codes)) == "a,b,c"

    def test_punctuate_empty(self) -> None:
        assert punctuate(comma(), []) == []

    def test_wrappers(self) -> None:
        assert render_dot(dquotes(text("x"))) == '"x"'
        assert render_dot(brackets(text("x"))) == "[x]"
        assert render_dot(angled(text("x"))) == "<x>"
        assert render_dot(wrap(text("("), text(")"), text("x"))) == "(x)"

    def test_list_doc(self) -> None:
        assert render_dot(list_doc([])) == "[]"
        assert render_dot(list_doc([text("a")])) == "[a]"
        assert render_dot(list_doc([text("a"), text("b"), text("c")])) == "[a,b,c]"

    def test_enclose_sep_breaks_aligned(self) -> None:
        items = [text("x" * 10) for _ in range(3)]
        code = text("v=") + enclose_sep(text("["), text("]"), comma(), items)
        config = RenderConfig(width=20, ribbon=1.0)
        lines = render_dot(code, config).split("\n")
        assert lines[0] == "v=[" + "x" * 10
        assert lines[1] == "  ," + "x" * 10

    def test_vcat_top_level_breaks(self) -> None:
        assert render_dot(vcat([text("a"), text("b")])) == "a\nb"

    def test_long_joins(self) -> None:
        codes = [text(str(i)) for i in range(5000)]
        assert render_dot(vcat(codes)).split("\n") == [str(i) for i in range(5000)]
        assert render_dot(hsep(codes)) == " ".join(str(i) for i in range(5000))

    def test_long_list_doc(self) -> None:
        codes = [text("x") for _ in range(5000)]
        rendered = render_dot(list_doc(codes))
        assert "".join(rendered.split()) == "[" + ",".join(["x"] * 5000) + "]"

    def test_nest_and_group(self) -> None:
        code = group(text("a") + nest(2, line() + text("b")))
        assert render_dot(code) == "a b"

    def test_repr_shows_rendering(self) -> None:
        assert repr(text("abc")) == "DotCode('abc')"


class TestRenderContext:
    def test_fresh_context_has_no_scheme(self) -> None:
        assert RenderContext().active_color_scheme is None

    def test_x11_active_by_default(self) -> None:
        ctx = RenderContext()
        assert ctx.scheme_is_active(X11)
        assert not ctx.scheme_is_active(BLUES9)

    def test_last_write_wins(self) -> None:
        ctx = RenderContext()
        ctx.set_color_scheme(BLUES9)
        ctx.set_color_scheme(X11)
        assert ctx.active_color_scheme == X11
        assert not ctx.scheme_is_active(BLUES9)

    def test_set_color_scheme_emits_nothing(self) -> None:
        ctx = RenderContext()
        assert set_color_scheme(BLUES9).run(ctx) is EMPTY
        assert ctx.active_color_scheme == BLUES9

    def test_left_runs_before_right(self) -> None:
        code = set_color_scheme(BLUES9) + _scheme_name()
        assert render_dot(code) == "blues9"

    def test_reader_before_writer_sees_nothing(self) -> None:
        code = _scheme_name() + set_color_scheme(BLUES9)
        assert render_dot(code) == "none"

    def test_each_render_starts_fresh(self) -> None:
        render_dot(set_color_scheme(BLUES9))
        assert render_dot(_scheme_name()) == "none"

    def test_deterministic(self) -> None:
        code = set_color_scheme(BLUES9) + hsep([_scheme_name(), text("x")])
        assert render_dot(code) == render_dot(code)
