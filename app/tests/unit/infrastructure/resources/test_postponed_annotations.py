"""Injection into classes declared with postponed annotations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Optional

import pytest

from infrastructure.resources import (
    IntrospectionMemberSource,
    InjectedResource,
    create_resource_injector,
    create_resource_resolver,
    injected_resource,
)

if TYPE_CHECKING:
    from decimal import Context


class Widget:
    title: Annotated[str, InjectedResource(key="window.title")] = ""
    width: Optional[Annotated[int, InjectedResource(key="window.width")]] = None
    ctx: Context | None = None
    label: str = ""

    def __init__(self):
        self.status: Optional[int] = None

    @injected_resource(key="window.status")
    def set_status(self, value: int) -> Context | None:
        self.status = value
        return None


@pytest.fixture
def widget_injector():
    return create_resource_injector(
        create_resource_resolver(
            {
                "en": {
                    "window.title": "Main window",
                    "window.width": "640",
                    "window.status": "3",
                }
            }
        )
    )


@pytest.mark.unit
class TestPostponedAnnotations:
    """Hints naming TYPE_CHECKING-only imports never reach evaluation."""

    def test_members_ignore_unresolvable_hints(self):
        members = IntrospectionMemberSource().members_of(Widget)

        assert {m.name: m.target_type for m in members} == {
            "title": str,
            "width": int,
            "set_status": int,
        }

    def test_inject_populates_marked_members(self, widget_injector):
        widget = Widget()

        widget_injector.inject(widget)

        assert widget.title == "Main window"
        assert widget.width == 640
        assert widget.status == 3
        assert widget.ctx is None
        assert widget.label == ""
