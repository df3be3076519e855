# campus_cms/domain/document.py
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .exceptions import InvariantViolation


@dataclass
class ComponentNode:
    """
    One node of a page's component tree.

    `type` is an open set (new component kinds are added by the editor
    without touching the core) and `props` is opaque structured data.
    """
    id: str
    type: str
    props: Dict[str, Any] = field(default_factory=dict)
    children: List["ComponentNode"] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Any, path: str) -> "ComponentNode":
        if not isinstance(raw, Mapping):
            raise InvariantViolation(f"{path} must be an object")

        node_id = raw.get("id")
        node_type = raw.get("type")
        if not isinstance(node_id, str) or not node_id:
            raise InvariantViolation(f"{path}.id must be a non-empty string")
        if not isinstance(node_type, str) or not node_type:
            raise InvariantViolation(f"{path}.type must be a non-empty string")

        props = raw.get("props", {})
        if not isinstance(props, Mapping):
            raise InvariantViolation(f"{path}.props must be an object")

        children = raw.get("children")
        if children is None:
            children = []
        if not isinstance(children, list):
            raise InvariantViolation(f"{path}.children must be a list")

        return cls(
            id=node_id,
            type=node_type,
            props=dict(props),
            children=[
                cls.from_dict(child, f"{path}.children[{i}]")
                for i, child in enumerate(children)
            ],
        )


@dataclass
class PageDocument:
    components: List[ComponentNode]
    meta: Optional[Dict[str, Any]] = None

    @classmethod
    def from_dict(cls, raw: Any) -> "PageDocument":
        if not isinstance(raw, Mapping):
            raise InvariantViolation("Page document must be a JSON object")

        components = raw.get("components")
        if not isinstance(components, list):
            raise InvariantViolation("Page document must contain a 'components' list")

        meta = raw.get("meta")
        if meta is not None and not isinstance(meta, Mapping):
            raise InvariantViolation("Page document 'meta' must be an object")

        return cls(
            components=[
                ComponentNode.from_dict(node, f"components[{i}]")
                for i, node in enumerate(components)
            ],
            meta=dict(meta) if meta is not None else None,
        )


def default_document(name: str) -> Dict[str, Any]:
    return {
        "components": [],
        "meta": {
            "title": name,
            "description": "",
            "keywords": [],
        },
    }


def coerce_document(raw: Any) -> Dict[str, Any]:
    """
    Check the document envelope and return a private deep copy of it.

    The stored value is the caller's document as given, not a re-serialized
    PageDocument, so unknown keys survive untouched.
    """
    PageDocument.from_dict(raw)
    return copy.deepcopy(dict(raw))
