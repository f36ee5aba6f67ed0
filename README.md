# operatorkit

Small building blocks for writing Kubernetes operators in Python:

- **Status conditions** (`operatorkit.condition`): a list of conditions
  kept sorted with `Ready` first, transition-time tracking, and a way to
  mirror the most important condition into a parent object.
- **Pod anti-affinity** (`operatorkit.affinity`): a preferred rule that
  spreads replicas across topology domains.
- **Network attachment annotations** (`operatorkit.annotations`): the
  `k8s.v1.cni.cncf.io/networks` pod annotation.
- **Ansible inventories** (`operatorkit.inventory`): build groups, hosts
  and child groups, then render them as YAML.

## Installation

```
pip install operatorkit
```

The only runtime dependency is PyYAML, used for inventory output.

## Conditions

The condition code lives in three modules:

- `operatorkit.condition.types`: the `Condition` dataclass and the
  `ConditionStatus` (`TRUE`, `FALSE`, `UNKNOWN`) and `Severity` (`ERROR`,
  `WARNING`, `INFO`, `NONE`) enums.
- `operatorkit.condition.constants`: common condition types (such as
  `READY_CONDITION`, `DB_READY_CONDITION`), reasons (such as
  `ERROR_REASON`) and messages. Messages containing `%s` take one argument.
- `operatorkit.condition.funcs`: the `Conditions` list and helper
  functions.

```python
from operatorkit.condition.funcs import Conditions, create_list, unknown_condition
from operatorkit.condition.types import Severity
from operatorkit.condition import constants

conditions = Conditions()
conditions.init(create_list(
    unknown_condition(constants.DB_READY_CONDITION, constants.INIT_REASON,
                      constants.DB_READY_INIT_MESSAGE),
))

conditions.mark_false(
    constants.DB_READY_CONDITION,
    constants.ERROR_REASON,
    Severity.ERROR,
    constants.DB_READY_ERROR_MESSAGE,
    "connection refused",
)

conditions.is_false(constants.DB_READY_CONDITION)   # True
summary = conditions.mirror("ServiceReady")         # the False/Error DBReady condition, retyped
```

How `Conditions` behaves:

- `init()` sets `Ready` to Unknown (reason `Requested`, message
  `Setup started`) and then adds any conditions passed in.
- `set()` adds a condition, or replaces an existing one of the same type
  only when its status, reason, severity or message differs. A condition
  without a `last_transition_time` gets the current UTC time, truncated to
  the second. After each change the list is sorted with `Ready` first and
  the rest by type.
- `get()` returns a copy of the condition, or `None`; `has()`,
  `is_true()`, `is_false()` and `is_unknown()` query it (a missing
  condition counts as Unknown).
- `mark_true()`, `mark_false()` and `mark_unknown()` build and set a
  condition in one step; `remove()` drops a type.
- `all_sub_conditions_true()` checks every condition other than `Ready`.
- `sort_by_last_transition_time()` puts the most recent change first.
- `mirror(type)` returns a `True` `Ready` condition retyped when there is
  one; otherwise the latest condition of the most severe group, ordered
  False (Error, Warning, Info), Unknown, True. A condition with any other
  status raises `InvalidConditionStatusError`.

Module-level helpers: `true_condition`, `false_condition`,
`unknown_condition`, `create_list` (skips `None`), `has_same_state`,
`is_error` (False with reason `Error`), `get_higher_prio_condition`
(more severe group wins, later transition time on a tie) and
`restore_last_transition_times`, which copies times over from a saved list
for conditions whose state is unchanged.

`Condition.to_dict()` and `Condition.from_dict()` convert to and from the
serialised layout (`type`, `status`, `severity`, `lastTransitionTime`,
`reason`, `message`), leaving out empty optional fields.

## Pod anti-affinity

```python
from operatorkit.affinity import distribute_pods

affinity = distribute_pods("service", ["keystone"], "kubernetes.io/hostname")
```

The result is a plain dictionary in the Kubernetes API layout: one
preferred pod anti-affinity term with weight 1 and an `In` match on the
selector key.

## Network attachment annotation

```python
from operatorkit.annotations import get_nad_annotation

get_nad_annotation("openstack", ["internalapi", "storage"])
# {'k8s.v1.cni.cncf.io/networks':
#  '[{"Name":"internalapi","Namespace":"openstack"},{"Name":"storage","Namespace":"openstack"}]'}
```

## Ansible inventory

```python
from operatorkit.inventory import Group, Inventory

inventory = Inventory()
all_group = inventory.add_group("all")
all_group.add_host("testing").vars["ansible_host"] = "host.test"
child = all_group.add_child(Group("child_test"))
child.add_host("child_testing").vars["ansible_host"] = "child.host.test"

print(inventory.to_yaml())
```

Output uses four-space indentation. Empty `vars`, `hosts` and `children`
sections are left out, and mapping keys are ordered with embedded numbers
compared by value.

## What this package does not do

It only builds and evaluates data. It has no Kubernetes client: nothing
here creates, patches, reads or deletes resources in a cluster, and
conditions are not stored anywhere beyond the objects you hold.

## Running the tests

```
pip install "operatorkit[test]"
pytest
```