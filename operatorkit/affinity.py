"""Pod scheduling affinity rules."""

from __future__ import annotations

from typing import Any


def distribute_pods(
    selector_key: str,
    selector_values: list[str],
    topology_key: str,
) -> dict[str, Any]:
    """Return an affinity that prefers not to place matching pods on the same topology domain.

    The topology key is usually ``kubernetes.io/hostname``.
    """
    return {
        "podAntiAffinity": {
            "preferredDuringSchedulingIgnoredDuringExecution": [
                {
                    "podAffinityTerm": {
                        "labelSelector": {
                            "matchExpressions": [
                                {
                                    "key": selector_key,
                                    "operator": "In",
                                    "values": list(selector_values),
                                }
                            ]
                        },
                        "topologyKey": topology_key,
                    },
                    "weight": 1,
                }
            ]
        }
    }