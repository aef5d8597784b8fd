"""Navigation buttons and the actions wired to them.

A button owns its display surface (title markup and icon) while its
:class:`Action` decides what clicking it does. Actions contribute markup and
a click script for the navbar, plus a one-off footer fragment such as a modal
definition. :class:`ButtonRegistry` folds those contributions in registration
order.
"""

from __future__ import annotations

import dataclasses as dc
import hashlib
import typing as typ

from markupsafe import Markup, escape

from panelkit._constants import PJAX_CONTAINER_SELECTOR

from .rowdata import parse_table_data_template


class Action(typ.Protocol):
    """Behaviour attached to a navigation button."""

    def content(self, button: ActionButton) -> tuple[str, str]:
        """Return the nav markup and click script for ``button``.

        Implementations must be free of side effects; repeated calls return
        identical output.
        """
        ...

    def footer_content(self) -> str:
        """Return markup appended once to the page footer."""
        ...


@dc.dataclass(frozen=True, slots=True)
class ActionButton:
    """A navbar control bound to an :class:`Action`."""

    title: Markup
    icon: str
    action: Action

    @property
    def id(self) -> str:
        """Return a stable DOM class identifying this button and its action.

        Buttons sharing a title and icon still get distinct classes when their
        actions differ, so click handlers never bind to each other.
        """
        digest = hashlib.sha1(
            f"{self.title}|{self.icon}|{self.action!r}".encode(), usedforsecurity=False
        ).hexdigest()
        return f"nav-btn-{digest[:10]}"

    def get_action(self) -> Action:
        """Return the action wired to this button."""
        return self.action

    def content(self) -> tuple[str, str]:
        """Return the nav markup and click script contributed by the action."""
        return self.action.content(self)


def get_nav_button(title: str, icon: str, action: Action) -> ActionButton:
    """Build a navbar button from trusted title markup."""
    return ActionButton(title=Markup(title), icon=icon, action=action)


def _nav_link(button: ActionButton, attributes: str) -> str:
    icon = f'<i class="fa {escape(button.icon)}"></i> ' if button.icon else ""
    return (
        f'<li><a class="{button.id}"{attributes}>{icon}'
        f'<span class="hidden-xs">{button.title}</span></a></li>'
    )


@dc.dataclass(frozen=True, slots=True)
class JumpAction:
    """Navigate to a URL, through pjax unless a window target is given.

    ``url`` may reference ``{{.Ids}}`` to embed the selected table rows, for
    example ``/admin/export?ids=' + {{.Ids}} + '``.
    """

    url: str
    target: str = ""

    def content(self, button: ActionButton) -> tuple[str, str]:
        """Return a plain anchor, plus a pjax click handler when untargeted."""
        url = parse_table_data_template(self.url)
        if self.target:
            attributes = f' href="{escape(url)}" target="{escape(self.target)}"'
            return _nav_link(button, attributes), ""
        script = (
            f"$('.{button.id}').on('click', function (event) {{"
            "event.preventDefault();"
            f"$.pjax({{url: '{url}', container: '{PJAX_CONTAINER_SELECTOR}'}});"
            "});"
        )
        return _nav_link(button, ' href="javascript:;"'), script

    def footer_content(self) -> str:
        """Jump actions need no footer markup."""
        return ""


@dc.dataclass(frozen=True, slots=True)
class PopUpAction:
    """Load ``url`` into a modal dialog defined once in the page footer."""

    url: str
    title: str
    method: str = "post"

    @property
    def modal_id(self) -> str:
        """Return the DOM id of the modal owned by this action."""
        digest = hashlib.sha1(
            f"{self.url}|{self.title}".encode(), usedforsecurity=False
        ).hexdigest()
        return f"popup-{digest[:10]}"

    def content(self, button: ActionButton) -> tuple[str, str]:
        """Return a modal trigger and the script that fills the modal body."""
        url = parse_table_data_template(self.url)
        attributes = f' href="javascript:;" data-toggle="modal" data-target="#{self.modal_id}"'
        script = (
            f"$('.{button.id}').on('click', function () {{"
            f"$.ajax({{url: '{url}', type: '{escape(self.method)}',"
            "success: function (data) {"
            f"$('#{self.modal_id} .modal-body').html(data);"
            "}});"
            "});"
        )
        return _nav_link(button, attributes), script

    def footer_content(self) -> str:
        """Return the modal definition targeted by the button."""
        return (
            f'<div class="modal fade" id="{self.modal_id}" tabindex="-1" role="dialog">'
            '<div class="modal-dialog" role="document"><div class="modal-content">'
            '<div class="modal-header">'
            '<button type="button" class="close" data-dismiss="modal">&times;</button>'
            f'<h4 class="modal-title">{escape(self.title)}</h4></div>'
            '<div class="modal-body"></div>'
            "</div></div></div>"
        )


@dc.dataclass(frozen=True, slots=True)
class ButtonRegistry:
    """Ordered, append-only collection of nav buttons."""

    buttons: tuple[ActionButton, ...] = ()

    def __iter__(self) -> typ.Iterator[ActionButton]:
        """Iterate over buttons in registration order."""
        return iter(self.buttons)

    def __len__(self) -> int:
        """Return the number of registered buttons."""
        return len(self.buttons)

    def append(self, button: ActionButton) -> ButtonRegistry:
        """Return a new registry with ``button`` added last."""
        return ButtonRegistry((*self.buttons, button))

    def content(self) -> tuple[str, str]:
        """Return concatenated nav markup and click scripts."""
        markup: list[str] = []
        scripts: list[str] = []
        for button in self.buttons:
            html, js = button.content()
            markup.append(html)
            scripts.append(js)
        return "".join(markup), "".join(scripts)

    def footer_content(self) -> str:
        """Return every action's footer fragment, one per button, in order."""
        return "".join(button.get_action().footer_content() for button in self.buttons)


__all__ = [
    "Action",
    "ActionButton",
    "ButtonRegistry",
    "JumpAction",
    "PopUpAction",
    "get_nav_button",
]
