"""Tests for panel content composition.

These cover the wrapping contract of ``panelkit.page.compose``: exactly one
content container per call, the fixed order in which the sidebar and refresh
scripts are appended, the animation attributes and their cleanup script, and
minification as the final stage.
"""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from panelkit.config import AnimationConfig
from panelkit.page import Panel, RenderOptions, compose

NO_ANIMATION = AnimationConfig()
FADE = AnimationConfig(type="fade")


def _containers(html: str, *, recursive: bool = False) -> list:
    soup = BeautifulSoup(html, "html.parser")
    return soup.find_all("div", class_="pjax-container-content", recursive=recursive)


@pytest.mark.parametrize(
    ("mini_sidebar", "auto_refresh", "animation"),
    [
        (False, False, NO_ANIMATION),
        (True, False, FADE),
        (False, True, NO_ANIMATION),
        (True, True, FADE),
    ],
)
def test_compose_wraps_content_once(
    mini_sidebar: bool, auto_refresh: bool, animation: AnimationConfig
) -> None:
    panel = Panel(
        content="<p>hi</p>", mini_sidebar=mini_sidebar, auto_refresh=auto_refresh
    )
    composed = compose(panel, animation)
    containers = _containers(str(composed.content))
    assert len(containers) == 1
    assert containers[0].p.get_text() == "hi"
    assert len(_containers(str(composed.content), recursive=True)) == 1


def test_compose_twice_nests_containers() -> None:
    panel = Panel(content="<p>hi</p>")
    twice = compose(compose(panel, NO_ANIMATION), NO_ANIMATION)
    html = str(twice.content)
    assert html == (
        '<div class="pjax-container-content">'
        '<div class="pjax-container-content"><p>hi</p></div>'
        "</div>"
    )
    assert len(_containers(html, recursive=True)) == 2


def test_compose_leaves_source_panel_untouched() -> None:
    panel = Panel(title="Users", content="<p>hi</p>", url="/admin/info/users")
    composed = compose(panel, FADE)
    assert str(panel.content) == "<p>hi</p>"
    assert composed.title == "Users"
    assert composed.url == "/admin/info/users"
    assert composed is not panel


def test_sidebar_script_precedes_refresh_script() -> None:
    panel = Panel(content="x", mini_sidebar=True, auto_refresh=True)
    html = str(compose(panel, NO_ANIMATION).content)
    sidebar_at = html.index('addClass("sidebar-collapse")')
    refresh_at = html.index("$.pjax.reload('#pjax-container')")
    assert html.index("</div>") < sidebar_at < refresh_at


def test_auto_refresh_defaults_to_sixty_seconds() -> None:
    panel = Panel(content="x", auto_refresh=True, refresh_interval=())
    html = str(compose(panel, NO_ANIMATION).content)
    assert "}, 60000);" in html


def test_auto_refresh_uses_first_interval() -> None:
    panel = Panel(content="x", auto_refresh=True, refresh_interval=[5, 30])
    html = str(compose(panel, NO_ANIMATION).content)
    assert "}, 5000);" in html
    assert "30000" not in html


def test_no_scripts_without_flags() -> None:
    html = str(compose(Panel(content="x"), NO_ANIMATION).content)
    assert "<script>" not in html
    assert html == '<div class="pjax-container-content">x</div>'


def test_empty_animation_type_emits_nothing() -> None:
    animation = AnimationConfig(type="", delay=1.0, duration=2.0)
    html = str(compose(Panel(content="x"), animation).content)
    assert "animated" not in html
    assert "style=" not in html
    assert "removeClass" not in html


def test_animation_without_timings_has_class_and_cleanup_only() -> None:
    html = str(compose(Panel(content="x"), FADE).content)
    container = _containers(html)[0]
    assert container["class"] == ["pjax-container-content", "animated", "fade"]
    assert container.get("style") is None
    assert "removeClass('fade')" in html
    assert "show.bs.modal" in html


def test_animation_delay_and_duration_co_occur() -> None:
    animation = AnimationConfig(type="fadeInUp", delay=0.5, duration=1.25)
    html = str(compose(Panel(content="x"), animation).content)
    style = _containers(html)[0]["style"]
    assert "animation-delay: 0.500000s;" in style
    assert "-webkit-animation-delay: 0.500000s;" in style
    assert "animation-duration: 1.250000s;" in style
    assert "-webkit-animation-duration: 1.250000s;" in style


def test_animation_delay_only() -> None:
    animation = AnimationConfig(type="fadeIn", delay=2)
    html = str(compose(Panel(content="x"), animation).content)
    style = _containers(html)[0]["style"]
    assert "animation-delay: 2.000000s;" in style
    assert "duration" not in style


def test_suppressed_animation_emits_nothing() -> None:
    options = RenderOptions(suppress_animation=True)
    html = str(compose(Panel(content="x"), FADE, options).content)
    assert html == '<div class="pjax-container-content">x</div>'


def test_production_minifies_fully_composed_content() -> None:
    seen: list[str] = []

    def _compressor(content: str) -> str:
        seen.append(content)
        return "minified"

    panel = Panel(content="x", mini_sidebar=True, auto_refresh=True)
    composed = compose(
        panel, FADE, RenderOptions(production=True), compressor=_compressor
    )
    assert str(composed.content) == "minified"
    assert len(seen) == 1
    assert "sidebar-collapse" in seen[0]
    assert "$.pjax.reload" in seen[0]
    assert "removeClass('fade')" in seen[0]


def test_production_default_compressor_strips_whitespace() -> None:
    panel = Panel(content="<ul>\n    <li>one</li>\n    <li>two</li>\n</ul>")
    html = str(compose(panel, NO_ANIMATION, RenderOptions(production=True)).content)
    assert html == (
        '<div class="pjax-container-content"><ul><li>one</li><li>two</li></ul></div>'
    )


def test_development_mode_does_not_minify() -> None:
    panel = Panel(content="<ul>\n  <li>one</li>\n</ul>")
    html = str(compose(panel, NO_ANIMATION).content)
    assert "\n  <li>one</li>" in html
