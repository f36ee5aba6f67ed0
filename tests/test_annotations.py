import pytest

from operatorkit.annotations import NETWORK_ATTACHMENT_ANNOT, get_nad_annotation


@pytest.mark.parametrize(
    ("networks", "namespace", "want"),
    [
        ([], "foo", {NETWORK_ATTACHMENT_ANNOT: "[]"}),
        (
            ["one"],
            "foo",
            {NETWORK_ATTACHMENT_ANNOT: '[{"Name":"one","Namespace":"foo"}]'},
        ),
        (
            ["one", "two"],
            "foo",
            {
                NETWORK_ATTACHMENT_ANNOT: '[{"Name":"one","Namespace":"foo"},'
                '{"Name":"two","Namespace":"foo"}]'
            },
        ),
    ],
)
def test_get_nad_annotation(networks, namespace, want):
    result = get_nad_annotation(namespace, networks)
    assert len(result) == len(want)
    assert result == want


def test_annotation_key():
    assert list(get_nad_annotation("ns", ["a"])) == ["k8s.v1.cni.cncf.io/networks"]


def test_html_characters_are_escaped():
    result = get_nad_annotation("a&b", ["<x>"])
    assert result[NETWORK_ATTACHMENT_ANNOT] == (
        '[{"Name":"\\u003cx\\u003e","Namespace":"a\\u0026b"}]'
    )


def test_unencodable_value_raises():
    with pytest.raises(ValueError, match="failed to encode networks"):
        get_nad_annotation("ns", [object()])