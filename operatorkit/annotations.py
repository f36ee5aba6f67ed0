"""Pod annotations for network attachment definitions."""

from __future__ import annotations

import json

NETWORK_ATTACHMENT_ANNOT = "k8s.v1.cni.cncf.io/networks"

_HTML_SAFE = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _encode(value: object) -> str:
    text = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return "".join(_HTML_SAFE.get(char, char) for char in text)


def get_nad_annotation(namespace: str, nads: list[str]) -> dict[str, str]:
    """Return the pod annotation attaching the named networks in ``namespace``.

    Deprecated in favour of building network annotations with explicit options.
    """
    networks = [{"Name": nad, "Namespace": namespace} for nad in nads]
    try:
        encoded = _encode(networks)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"failed to encode networks {nads} into json: {exc}") from exc
    return {NETWORK_ATTACHMENT_ANNOT: encoded}