"""Tests for navbar buttons, their actions and the ordered registry."""

from __future__ import annotations

import dataclasses as dc

from bs4 import BeautifulSoup

from panelkit._constants import SELECTED_ROWS_EXPRESSION
from panelkit.page import ButtonRegistry, JumpAction, PopUpAction, get_nav_button


@dc.dataclass(frozen=True)
class RecordingAction:
    """Action returning fixed fragments tagged with ``name``."""

    name: str

    def content(self, button: object) -> tuple[str, str]:
        return f"<li>{self.name}</li>", f"{self.name}();"

    def footer_content(self) -> str:
        return f"<div id='{self.name}'></div>"


def test_button_content_delegates_to_action() -> None:
    button = get_nav_button("Export", "fa-download", RecordingAction("export"))
    assert button.content() == ("<li>export</li>", "export();")
    assert button.get_action() == RecordingAction("export")


def test_button_content_is_idempotent() -> None:
    button = get_nav_button("Go", "fa-link", JumpAction("/admin/info/users"))
    assert button.content() == button.content()


def test_button_id_is_stable_for_the_same_button() -> None:
    first = get_nav_button("Go", "fa-link", JumpAction("/a"))
    again = get_nav_button("Go", "fa-link", JumpAction("/a"))
    assert first.id == again.id
    assert first.id.startswith("nav-btn-")


def test_buttons_with_distinct_actions_get_distinct_ids() -> None:
    first = get_nav_button("Go", "fa-link", JumpAction("/a"))
    second = get_nav_button("Go", "fa-link", JumpAction("/b"))
    other = get_nav_button("Go", "fa-star", JumpAction("/a"))
    assert len({first.id, second.id, other.id}) == 3

    registry = ButtonRegistry((first, second))
    _, js = registry.content()
    assert js.count(f"$('.{first.id}')") == 1
    assert js.count(f"$('.{second.id}')") == 1


def test_registry_append_returns_new_registry() -> None:
    empty = ButtonRegistry()
    one = empty.append(get_nav_button("A", "", RecordingAction("a")))
    assert len(empty) == 0
    assert len(one) == 1


def test_registry_folds_contributions_in_order() -> None:
    registry = ButtonRegistry()
    for name in ("a", "b", "a"):
        registry = registry.append(get_nav_button(name, "", RecordingAction(name)))
    nav_html, nav_js = registry.content()
    assert nav_html == "<li>a</li><li>b</li><li>a</li>"
    assert nav_js == "a();b();a();"
    assert registry.footer_content() == (
        "<div id='a'></div><div id='b'></div><div id='a'></div>"
    )


def test_jump_action_with_target_renders_plain_link() -> None:
    button = get_nav_button("Docs", "fa-book", JumpAction("/docs", target="_blank"))
    html, js = button.content()
    link = BeautifulSoup(html, "html.parser").a
    assert link["href"] == "/docs"
    assert link["target"] == "_blank"
    assert link.i["class"] == ["fa", "fa-book"]
    assert js == ""


def test_jump_action_embeds_selected_rows() -> None:
    action = JumpAction("/admin/export?ids=' + {{.Ids}} + '")
    button = get_nav_button("Export", "", action)
    html, js = button.content()
    assert f"url: '/admin/export?ids=' + {SELECTED_ROWS_EXPRESSION} + ''" in js
    assert f"$('.{button.id}')" in js
    assert "#pjax-container" in js
    assert BeautifulSoup(html, "html.parser").a["class"] == [button.id]
    assert action.footer_content() == ""


def test_popup_action_contributes_modal_footer() -> None:
    action = PopUpAction("/admin/preview/{{.Ids}}", "Preview <rows>")
    button = get_nav_button("Preview", "fa-eye", action)
    html, js = button.content()
    link = BeautifulSoup(html, "html.parser").a
    assert link["data-target"] == f"#{action.modal_id}"
    assert f"url: '/admin/preview/{SELECTED_ROWS_EXPRESSION}'" in js
    assert "type: 'post'" in js

    footer = BeautifulSoup(action.footer_content(), "html.parser")
    modal = footer.find("div", id=action.modal_id)
    assert modal is not None
    assert modal.find(class_="modal-title").get_text() == "Preview <rows>"


def test_broken_action_url_degrades_to_empty_link() -> None:
    button = get_nav_button("Broken", "", JumpAction("/x/{{.Id", target="_self"))
    html, _ = button.content()
    assert BeautifulSoup(html, "html.parser").a["href"] == ""
