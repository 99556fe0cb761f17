"""Rich chat text components and their JSON wire form."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass, field, fields, replace
from typing import Any, Union

from craftproto.protocol import write_string

_COLOR_NAMES = (
    "black",
    "dark_blue",
    "dark_green",
    "dark_aqua",
    "dark_red",
    "dark_purple",
    "gold",
    "gray",
    "dark_gray",
    "blue",
    "green",
    "aqua",
    "red",
    "light_purple",
    "yellow",
    "white",
)


@dataclass(frozen=True)
class Formatting:
    """Style attributes of a text component; unset attributes are left out."""

    color: str | None = None
    bold: bool | None = None
    italic: bool | None = None
    underlined: bool | None = None
    strikethrough: bool | None = None
    obfuscated: bool | None = None
    font: str | None = None

    @classmethod
    def builder(cls) -> FormattingBuilder:
        return FormattingBuilder()

    def to_dict(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


def _initial_formatting() -> Formatting:
    return Formatting(
        color="white",
        bold=False,
        italic=False,
        underlined=False,
        strikethrough=False,
        obfuscated=False,
        font="minecraft:default",
    )


@dataclass
class FormattingBuilder:
    """Collects style attributes and builds a :class:`Formatting`."""

    _color: str | None = None
    _bold: bool | None = None
    _italic: bool | None = None
    _underlined: bool | None = None
    _strikethrough: bool | None = None
    _obfuscated: bool | None = None
    _font: str | None = None

    def color(self, hex_code: int) -> FormattingBuilder:
        """Pick one of the sixteen named colours by its code 0x0-0xf."""
        if not 0 <= hex_code <= 0xF:
            raise ValueError(f"colour code must be between 0x0 and 0xf, got {hex_code}")
        self._color = _COLOR_NAMES[hex_code]
        return self

    def color_rgb(self, color: int) -> FormattingBuilder:
        """Use a 24-bit RGB colour, written as ``#`` and lower-case hex digits."""
        if not 0 <= color <= 0xFFFFFF:
            raise ValueError("color must be a 24 bit unsigned integer")
        self._color = f"#{color:x}"
        return self

    def bold(self, value: bool) -> FormattingBuilder:
        self._bold = value
        return self

    def italic(self, value: bool) -> FormattingBuilder:
        self._italic = value
        return self

    def underlined(self, value: bool) -> FormattingBuilder:
        self._underlined = value
        return self

    def strikethrough(self, value: bool) -> FormattingBuilder:
        self._strikethrough = value
        return self

    def obfuscated(self, value: bool) -> FormattingBuilder:
        self._obfuscated = value
        return self

    def font(self, font: str) -> FormattingBuilder:
        self._font = font
        return self

    def build(self) -> Formatting:
        return Formatting(
            color=self._color,
            bold=self._bold,
            italic=self._italic,
            underlined=self._underlined,
            strikethrough=self._strikethrough,
            obfuscated=self._obfuscated,
            font=self._font,
        )


class ClickEventAction(enum.Enum):
    OPEN_URL = "open_url"
    RUN_COMMAND = "run_command"
    SUGGEST_COMMAND = "suggest_command"
    CHANGE_PAGE = "change_page"
    COPY_TO_CLIPBOARD = "copy_to_clipboard"


@dataclass(frozen=True)
class ClickEvent:
    action: ClickEventAction
    value: str

    def to_dict(self) -> dict[str, Any]:
        return {"action": self.action.value, "value": self.value}


class HoverEventAction(enum.Enum):
    SHOW_TEXT = "show_text"
    SHOW_ITEM = "show_item"
    SHOW_ENTITY = "show_entity"


@dataclass(frozen=True)
class _ItemInfo:
    id: str
    count: int
    tag: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"id": self.id, "count": self.count}
        if self.tag is not None:
            out["tag"] = self.tag
        return out


@dataclass(frozen=True)
class _EntityInfo:
    type: str
    id: str
    name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "id": self.id, "name": self.name}


_Contents = Union["TextComponent", _ItemInfo, _EntityInfo]


@dataclass(frozen=True)
class HoverEvent:
    action: HoverEventAction
    contents: _Contents

    @classmethod
    def show_text(cls, component: TextComponent) -> HoverEvent:
        return cls(HoverEventAction.SHOW_TEXT, component)

    @classmethod
    def show_item(cls, item_identifier: str, count: int, snbt: str | None = None) -> HoverEvent:
        """Show an item; ``snbt`` is optional custom data as used by the give command."""
        return cls(HoverEventAction.SHOW_ITEM, _ItemInfo(item_identifier, count, snbt))

    @classmethod
    def show_entity(
        cls, entity_identifier: str, entity_uuid: str, custom_name: str | None = None
    ) -> HoverEvent:
        return cls(
            HoverEventAction.SHOW_ENTITY,
            _EntityInfo(entity_identifier, entity_uuid, custom_name),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"action": self.action.value, "contents": self.contents.to_dict()}


@dataclass
class TextComponent:
    """A piece of chat text with optional style, events and appended children."""

    text: str | None = None
    translate: str | None = None
    keybind: str | None = None
    formatting: Formatting | None = None
    insertion: str | None = None
    hover_event: HoverEvent | None = None
    click_event: ClickEvent | None = None
    extra: list[TextComponent] | None = None
    default_formatting: Formatting = field(default_factory=Formatting, compare=False)

    @classmethod
    def builder(cls) -> TextComponentBuilder:
        return TextComponentBuilder()

    def has_extra(self) -> bool:
        return self.extra is not None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for key, value in (
            ("text", self.text),
            ("translate", self.translate),
            ("keybind", self.keybind),
        ):
            if value is not None:
                out[key] = value
        if self.formatting is not None:
            out.update(self.formatting.to_dict())
        if self.insertion is not None:
            out["insertion"] = self.insertion
        if self.hover_event is not None:
            out["hoverEvent"] = self.hover_event.to_dict()
        if self.click_event is not None:
            out["clickEvent"] = self.click_event.to_dict()
        if self.extra is not None:
            out["extra"] = [child.to_dict() for child in self.extra]
        return out

    def to_json_string(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)

    def to_bytes(self) -> bytes:
        """Encode as a length-prefixed JSON string."""
        return write_string(self.to_json_string())


class TextComponentBuilder:
    """Builds a :class:`TextComponent`.

    The content (text, translation key or keybind) is chosen first and only
    once; styling, events and children can be set only after that.
    """

    def __init__(self, base_formatting: Formatting | None = None) -> None:
        self.base_formatting = (
            base_formatting if base_formatting is not None else _initial_formatting()
        )
        self._content: dict[str, str] = {}
        self._formatting: Formatting | None = None
        self._insertion: str | None = None
        self._hover_event: HoverEvent | None = None
        self._click_event: ClickEvent | None = None
        self._extra: list[TextComponent] | None = None

    def _with_content(self, key: str, value: str) -> TextComponentBuilder:
        if self._content:
            raise ValueError("the content of this component has already been chosen")
        # Choosing the content starts a fresh builder with empty default formatting.
        fresh = TextComponentBuilder(Formatting())
        fresh._content = {key: value}
        return fresh

    def _require_content(self) -> None:
        if not self._content:
            raise ValueError("choose text, translate or keybind first")

    def text(self, text: str) -> TextComponentBuilder:
        return self._with_content("text", text)

    def translate(self, translate: str) -> TextComponentBuilder:
        return self._with_content("translate", translate)

    def keybind(self, keybind: str) -> TextComponentBuilder:
        return self._with_content("keybind", keybind)

    def default_formatting(self, formatting: Formatting) -> TextComponentBuilder:
        if self._content:
            raise ValueError("default formatting must be set before the content")
        self.base_formatting = formatting
        return self

    def formatting(self, formatting: Formatting) -> TextComponentBuilder:
        self._require_content()
        self._formatting = formatting
        return self

    def reset_fmt(self) -> TextComponentBuilder:
        """Use the default formatting as this component's formatting."""
        self._require_content()
        self._formatting = self.base_formatting
        return self

    def insertion(self, insertion: str) -> TextComponentBuilder:
        self._require_content()
        self._insertion = insertion
        return self

    def hover_event(self, hover_event: HoverEvent) -> TextComponentBuilder:
        self._require_content()
        self._hover_event = hover_event
        return self

    def click_event(self, click_event: ClickEvent) -> TextComponentBuilder:
        self._require_content()
        self._click_event = click_event
        return self

    def _add_extra_unchecked(self, other: TextComponent) -> TextComponentBuilder:
        if self._extra is None:
            self._extra = []
        self._extra.append(replace(other, default_formatting=self.base_formatting))
        return self

    def add_extra(self, other: TextComponent) -> TextComponentBuilder:
        """Append a component; its own children are flattened in after it.

        The flattened children take the appended component's formatting (or
        its default formatting) as their default formatting.
        """
        self._require_content()
        if not other.has_extra():
            return self._add_extra_unchecked(other)
        children = list(other.extra or [])
        head = replace(other, extra=None, default_formatting=self.base_formatting)
        if self._extra is None:
            self._extra = []
        self._extra.append(head)
        inherited = head.formatting if head.formatting is not None else head.default_formatting
        self._extra.extend(replace(child, default_formatting=inherited) for child in children)
        return self

    def build(self) -> TextComponent:
        self._require_content()
        return TextComponent(
            text=self._content.get("text"),
            translate=self._content.get("translate"),
            keybind=self._content.get("keybind"),
            formatting=self._formatting,
            insertion=self._insertion,
            hover_event=self._hover_event,
            click_event=self._click_event,
            extra=list(self._extra) if self._extra is not None else None,
            default_formatting=self.base_formatting,
        )