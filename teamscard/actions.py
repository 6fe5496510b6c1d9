from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .errors import TeamsConfigError


def view_action(text: str, url: str) -> dict[str, Any]:
    """Minimal link-out button shared by sections and cards."""
    return {
        "@context": "http://schema.org",
        "@type": "ViewAction",
        "name": text,
        "target": [url],
    }


@dataclass(frozen=True)
class Choice:
    display: str
    value: str

    def dump(self) -> dict[str, str]:
        return {"display": self.display, "value": self.value}


def _is_target_list(targets: object) -> bool:
    if isinstance(targets, (str, bytes)) or not isinstance(targets, Sequence):
        return False
    for t in targets:
        if not isinstance(t, Mapping):
            return False
        if not all(isinstance(k, str) and isinstance(v, str) for k, v in t.items()):
            return False
    return True


class PotentialAction:
    """Builder for one entry of a card's ``potentialAction`` list.

    Three styles share the same mapping: an ActionCard with inputs, an
    ActionCard with sub-actions, or an OpenUri action. Switching to OpenUri
    after adding inputs or actions keeps those keys in the payload.
    """

    def __init__(self, name: str, kind: str = "ActionCard"):
        self.payload: dict[str, Any] = {"@type": kind, "name": name}
        self.choices: list[Choice] = []

    def add_input(self, kind: str, input_id: str, title: str, is_multiline: bool | None = None) -> PotentialAction:
        entry: dict[str, Any] = {"@type": kind, "id": input_id, "title": title}
        if is_multiline is not None:
            entry["isMultiline"] = is_multiline
        # Snapshot: choices added later do not reach this input.
        if self.choices:
            entry["choices"] = [c.dump() for c in self.choices]
        self.payload.setdefault("inputs", []).append(entry)
        return self

    def add_action(self, kind: str, name: str, target: str, body: str | None = None) -> PotentialAction:
        entry: dict[str, Any] = {"@type": kind, "name": name, "target": target}
        if body is not None:
            entry["body"] = body
        self.payload.setdefault("actions", []).append(entry)
        return self

    def add_open_uri(self, name: str, targets: Sequence[Mapping[str, str]]) -> PotentialAction:
        if not _is_target_list(targets):
            raise TeamsConfigError("targets must be a list of {str: str} mappings, e.g. [{'os': 'default', 'uri': url}]")
        self.payload["@type"] = "OpenUri"
        self.payload["name"] = name
        self.payload["targets"] = [dict(t) for t in targets]
        return self

    def add_choice(self, display: str, value: str) -> PotentialAction:
        self.choices.append(Choice(display, value))
        return self

    def dump(self) -> dict[str, Any]:
        return self.payload
