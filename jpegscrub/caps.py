# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Capabilities (Caps) describing the data that flows between elements.

A Caps is a small RDF graph about one subject node: its media type, a short
name, and free-form parameters such as scrub statistics.
"""

from __future__ import annotations

import json
from typing import Any

from rdflib import BNode, Graph, Literal, Namespace, URIRef
from rdflib.namespace import DCTERMS, RDF, RDFS

SCHEMA = Namespace("https://schema.org/")

JS = Namespace("urn:jpegscrub:caps#")
PARAM = Namespace("urn:jpegscrub:param:")

# Well-known params and the predicates they map to.
_PREDICATES = {
    "description": RDFS.comment,
    "extensions": SCHEMA["fileExtension"],
    "broader": RDFS.subClassOf,
}


class Caps:
    """Type description of a buffer, backed by an rdflib.Graph."""

    def __init__(
        self,
        media_type: str | None = None,
        name: str | None = None,
        params: dict[str, Any] | None = None,
    ):
        self._graph = Graph()
        self._graph.bind("js", JS)
        self._graph.bind("param", PARAM)
        self._graph.bind("dcterms", DCTERMS)
        self._graph.bind("schema", SCHEMA)

        params = dict(params or {})
        uri = params.pop("uri", None)
        if uri:
            self._node = URIRef(uri)
        elif name:
            self._node = JS[name]
        else:
            self._node = BNode()

        self._graph.add((self._node, RDF.type, JS.Caps))
        if media_type:
            self._graph.add((self._node, DCTERMS.format, Literal(media_type)))
        if name:
            self._graph.add((self._node, RDFS.label, Literal(name)))
        for key, value in params.items():
            self._add_param(key, value)

    def _add_param(self, key: str, value: Any) -> None:
        predicate = _PREDICATES.get(key, PARAM[key])
        values = value if isinstance(value, (list, tuple)) else [value]
        for v in values:
            obj = URIRef(str(v)) if key == "broader" else Literal(v)
            self._graph.add((self._node, predicate, obj))

    @property
    def media_type(self) -> str | None:
        val = self._graph.value(self._node, DCTERMS.format)
        return str(val) if val else None

    @property
    def name(self) -> str | None:
        val = self._graph.value(self._node, RDFS.label)
        return str(val) if val else None

    @property
    def uri(self) -> str:
        return str(self._node)

    @property
    def params(self) -> dict[str, Any]:
        """Rebuild the params dict from the graph.

        Multi-valued well-known params come back as tuples; generic params are
        scalars unless they were given more than once.
        """
        p: dict[str, Any] = {}
        for key, predicate in _PREDICATES.items():
            values = [str(o) for o in self._graph.objects(self._node, predicate)]
            if not values:
                continue
            p[key] = values[0] if key == "description" else tuple(sorted(values))

        generic: dict[str, list[Any]] = {}
        for _, pred, obj in self._graph.triples((self._node, None, None)):
            if pred.startswith(PARAM):
                key = str(pred)[len(str(PARAM)) :]
                generic.setdefault(key, []).append(
                    obj.toPython() if isinstance(obj, Literal) else str(obj)
                )
        for key, vals in generic.items():
            p[key] = vals[0] if len(vals) == 1 else vals

        p["uri"] = self.uri
        return p

    @property
    def extensions(self) -> tuple[str, ...]:
        return self.params.get("extensions", ())

    def merge_params(self, new_params: dict[str, Any]) -> Caps:
        """Return a new Caps with `new_params` layered over the current ones."""
        merged = self.params
        merged.update(new_params)
        return Caps(media_type=self.media_type, name=self.name, params=merged)

    def label(self) -> str:
        return self.name or self.media_type or "unknown"

    def __repr__(self) -> str:
        return f"Caps(media_type={self.media_type}, name={self.name})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Caps):
            return NotImplemented
        from rdflib.compare import to_isomorphic

        return to_isomorphic(self._graph) == to_isomorphic(other._graph)


def summarize_caps(caps: Caps, **extra: Any) -> str:
    """Return a JSON summary of the caps, with `extra` keys added on top."""
    info: dict[str, Any] = {
        "media_type": caps.media_type,
        "name": caps.name,
    }
    for key, value in caps.params.items():
        info.setdefault(key, value)
    info.update(extra)
    return json.dumps(info, indent=2, default=str)
