from __future__ import annotations

from typing import Any

from .actions import view_action


class CardSection:
    """One ``sections[]`` block: activity header, text, facts, images and a link button."""

    def __init__(self):
        self.payload: dict[str, Any] = {}

    def title(self, title: str) -> CardSection:
        self.payload["title"] = title
        return self

    def activity_title(self, activity_title: str) -> CardSection:
        self.payload["activityTitle"] = activity_title
        return self

    def activity_subtitle(self, activity_subtitle: str) -> CardSection:
        self.payload["activitySubtitle"] = activity_subtitle
        return self

    def activity_image(self, activity_image: str) -> CardSection:
        self.payload["activityImage"] = activity_image
        return self

    def activity_text(self, activity_text: str) -> CardSection:
        self.payload["activityText"] = activity_text
        return self

    def text(self, text: str) -> CardSection:
        self.payload["text"] = text
        return self

    def add_fact(self, name: str, value: str) -> CardSection:
        self.payload.setdefault("facts", []).append({"name": name, "value": value})
        return self

    def add_image(self, url: str, title: str | None = None) -> CardSection:
        image: dict[str, str] = {"image": url}
        if title is not None:
            image["title"] = title
        self.payload.setdefault("images", []).append(image)
        return self

    def link_button(self, text: str, url: str) -> CardSection:
        # Single slot: a second call replaces the first button.
        self.payload["potentialAction"] = [view_action(text, url)]
        return self

    def disable_markdown(self) -> CardSection:
        self.payload["markdown"] = False
        return self

    def enable_markdown(self) -> CardSection:
        self.payload["markdown"] = True
        return self

    def dump(self) -> dict[str, Any]:
        return self.payload
