from operatorkit.affinity import distribute_pods

EXPECTED = {
    "podAntiAffinity": {
        "preferredDuringSchedulingIgnoredDuringExecution": [
            {
                "podAffinityTerm": {
                    "labelSelector": {
                        "matchExpressions": [
                            {
                                "key": "ThisSelector",
                                "operator": "In",
                                "values": ["selectorValue1", "selectorValue2"],
                            }
                        ]
                    },
                    "topologyKey": "ThisTopologyKey",
                },
                "weight": 1,
            }
        ]
    }
}


def test_default_pod_distribution():
    result = distribute_pods(
        "ThisSelector", ["selectorValue1", "selectorValue2"], "ThisTopologyKey"
    )
    assert result == EXPECTED


def test_values_are_copied():
    values = ["a"]
    result = distribute_pods("k", values, "t")
    values.append("b")
    term = result["podAntiAffinity"]["preferredDuringSchedulingIgnoredDuringExecution"][0]
    assert term["podAffinityTerm"]["labelSelector"]["matchExpressions"][0]["values"] == ["a"]