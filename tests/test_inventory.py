import yaml

from operatorkit.inventory import Group, Host, Inventory


def test_marshal_basic():
    inventory = Inventory()
    all_group = inventory.add_group("all")
    host = all_group.add_host("testing")
    host.vars["ansible_host"] = "host.test"
    child = all_group.add_child(Group("child_test"))
    child_host = child.add_host("child_testing")
    child_host.vars["ansible_host"] = "child.host.test"

    expected = (
        "all:\n"
        "    hosts:\n"
        "        testing:\n"
        "            ansible_host: host.test\n"
        "    children:\n"
        "        child_test:\n"
        "            hosts:\n"
        "                child_testing:\n"
        "                    ansible_host: child.host.test\n"
    )
    assert inventory.to_yaml() == expected


def test_marshal_nested_children():
    inventory = Inventory()
    all_group = inventory.add_group("allovercloud")
    child = all_group.add_child(Group("overcloud"))
    compute = child.add_child(Group("Compute"))
    compute_host = compute.add_host("192.168.0.1")
    compute_host.vars["ansible_ssh_user"] = "root"

    expected = (
        "allovercloud:\n"
        "    children:\n"
        "        overcloud:\n"
        "            children:\n"
        "                Compute:\n"
        "                    hosts:\n"
        "                        192.168.0.1:\n"
        "                            ansible_ssh_user: root\n"
    )
    assert inventory.to_yaml() == expected


def test_group_vars_come_first():
    inventory = Inventory()
    group = inventory.add_group("web")
    group.vars["port"] = 80
    group.add_host("a")
    expected = (
        "web:\n"
        "    vars:\n"
        "        port: 80\n"
        "    hosts:\n"
        "        a: {}\n"
    )
    assert inventory.to_yaml() == expected


def test_keys_sorted_with_numeric_order():
    inventory = Inventory()
    group = inventory.add_group("g")
    for name in ["host10", "host2", "beta", "alpha"]:
        group.add_host(name)
    data = yaml.safe_load(inventory.to_yaml())
    assert list(data["g"]["hosts"]) == ["alpha", "beta", "host2", "host10"]


def test_empty_inventory():
    assert Inventory().to_yaml() == "{}\n"


def test_add_host_returns_shared_host():
    group = Group("g")
    host = group.add_host("h")
    host.vars["x"] = "y"
    assert group.hosts["h"] == Host("h", {"x": "y"})


def test_round_trip_structure():
    inventory = Inventory()
    group = inventory.add_group("g")
    host = group.add_host("h")
    host.vars["list"] = [1, 2]
    host.vars["nested"] = {"b": 1, "a": 2}
    loaded = yaml.safe_load(inventory.to_yaml())
    assert loaded == {"g": {"hosts": {"h": {"list": [1, 2], "nested": {"a": 2, "b": 1}}}}}


def test_shared_vars_do_not_produce_aliases():
    inventory = Inventory()
    group = inventory.add_group("g")
    shared = {"k": "v"}
    group.add_host("a").vars["cfg"] = shared
    group.add_host("b").vars["cfg"] = shared
    text = inventory.to_yaml()
    assert "&" not in text and "*" not in text